from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from geocv.contracts.data_configs import DataModel
from geocv.contracts.eval_configs import EvalModel
from geocv.contracts.grouping_configs import GroupingModel
from geocv.contracts.model_configs import ModelConfig, RidgeRegressorConfig
from geocv.contracts.run_config import ComparisonRunConfig
from geocv.registries.models import list_model_algos, make_model_builder


def test_column_lists_accept_comma_strings() -> None:
    assert DataModel(target="soc", predictors="a, b ,c").predictors == ["a", "b", "c"]
    assert GroupingModel(strategy="spatial", columns="lon,lat").columns == ["lon", "lat"]


def test_grouping_labels_must_be_unique() -> None:
    data = DataModel(target="soc", predictors=["a"])
    with pytest.raises(ValidationError, match="unique"):
        ComparisonRunConfig(data=data, groupings=[GroupingModel(), GroupingModel()])

    cfg = ComparisonRunConfig(
        data=data,
        groupings=[GroupingModel(n_groups=5), GroupingModel(n_groups=10, name="random-10")],
    )
    assert [rc.grouping.label for rc in cfg.run_configs()] == ["random", "random-10"]

    with pytest.raises(ValidationError):
        ComparisonRunConfig(data=data, groupings=[])


def test_eval_n_jobs() -> None:
    assert EvalModel(n_jobs="").n_jobs == 1
    assert EvalModel(n_jobs=-1).n_jobs == -1
    with pytest.raises(ValidationError):
        EvalModel(n_jobs=0)
    with pytest.raises(ValidationError):
        EvalModel(on_error="retry")


def test_model_union_dispatches_on_algo() -> None:
    cfg = TypeAdapter(ModelConfig).validate_python({"algo": "ridgereg", "alpha": 2.5})

    assert isinstance(cfg, RidgeRegressorConfig)
    est = make_model_builder(cfg).make_estimator(seed=3)
    assert est.alpha == 2.5

    with pytest.raises(ValidationError):
        TypeAdapter(ModelConfig).validate_python({"algo": "xgb"})


def test_every_algo_builds_an_unfitted_regressor() -> None:
    assert list_model_algos() == ["knnreg", "linreg", "rfreg", "ridgereg", "treereg"]
    for algo in list_model_algos():
        cfg = TypeAdapter(ModelConfig).validate_python({"algo": algo})
        est = make_model_builder(cfg).make_estimator(seed=0)
        assert hasattr(est, "fit") and hasattr(est, "predict")


def test_pinned_random_state_wins_over_fold_seed() -> None:
    cfg = TypeAdapter(ModelConfig).validate_python({"algo": "rfreg", "random_state": 99})

    assert make_model_builder(cfg).make_estimator(seed=1).random_state == 99
