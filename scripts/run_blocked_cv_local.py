# scripts/run_blocked_cv_local.py
from __future__ import annotations

import logging

from geocv.api import compare_strategies
from geocv.contracts.data_configs import DataModel
from geocv.contracts.eval_configs import EvalModel
from geocv.contracts.grouping_configs import GroupingModel
from geocv.contracts.model_configs import RandomForestRegressorConfig
from geocv.contracts.run_config import ComparisonRunConfig

# ==== EDIT THESE AS YOU LIKE ==================================================
DATA = DataModel(
    path=r"./data/soil/topsoil_carbon.csv",
    target="soc",
    predictors=["elevation", "slope", "twi", "ndvi", "mean_temp", "annual_precip", "landcover"],
)

GROUPINGS = [
    GroupingModel(strategy="random", n_groups=10),
    GroupingModel(strategy="spatial", n_groups=10, columns=["x", "y"]),
    GroupingModel(
        strategy="environmental",
        n_groups=10,
        columns=["elevation", "mean_temp", "annual_precip"],  # standardized by default
    ),
]

MODEL = RandomForestRegressorConfig(
    n_estimators=500,
    max_features=1.0 / 3.0,   # mtry as a fraction of the predictors
    min_samples_leaf=5,
)

EVAL = EvalModel(
    seed=42,
    n_jobs=-1,                 # one worker per fold; 1 = sequential
    on_error="continue",       # "cancel" stops scheduling folds after the first failure
    allow_missing_groups=False,
    compute_importances=True,
)
# ============================================================================


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cfg = ComparisonRunConfig(data=DATA, groupings=GROUPINGS, model=MODEL, eval=EVAL)
    comparison = compare_strategies(cfg)

    print("\n=== STRATEGY COMPARISON ===")
    print(comparison.to_frame().to_string(index=False))

    for report in comparison.reports:
        print(f"\n--- {report.strategy} ({report.algo}, k={report.n_groups}) ---")
        print(report.to_frame().to_string(index=False))
        if report.configuration_errors:
            print("Configuration errors:")
            for p in report.configuration_errors:
                print(f"- group {p.group_label}: {p.message}")
        if report.notes:
            print("Notes:")
            for n in report.notes:
                print(f"- {n}")


if __name__ == "__main__":
    main()
