from __future__ import annotations

"""Fan-in: fold results -> one ordered, immutable report."""

import logging
from typing import Iterable, Mapping, Optional, Sequence, Union

from geocv.components.evaluation.fold_evaluator import contract_label
from geocv.components.splitters.types import FoldPlan
from geocv.contracts.results import ConfigurationProblem, CrossValidationReport, FoldResult

logger = logging.getLogger(__name__)


def _as_mapping(results: Union[Mapping[int, FoldResult], Iterable[FoldResult]]) -> dict[int, FoldResult]:
    if isinstance(results, Mapping):
        out = {}
        for fold_id, res in results.items():
            if int(fold_id) != res.fold_id:
                raise ValueError(f"Result keyed as fold {fold_id} reports fold_id={res.fold_id}")
            out[int(fold_id)] = res
        return out

    out = {}
    for res in results:
        if res.fold_id in out:
            raise ValueError(f"Fold {res.fold_id} has more than one result")
        out[res.fold_id] = res
    return out


def aggregate_fold_results(
    plan: FoldPlan,
    results: Union[Mapping[int, FoldResult], Iterable[FoldResult]],
    *,
    strategy: str,
    algo: str = "",
    n_groups: Optional[int] = None,
    seed: Optional[int] = None,
    notes: Sequence[str] = (),
) -> CrossValidationReport:
    """Order results by fold id and attach the plan's configuration problems.

    Raises ``ValueError`` when a planned fold has no result or a result does
    not belong to the plan.
    """

    by_id = _as_mapping(results)
    planned = plan.fold_ids

    missing = [i for i in planned if i not in by_id]
    if missing:
        raise ValueError(f"No result for planned fold(s) {missing}")
    extra = sorted(set(by_id) - set(planned))
    if extra:
        raise ValueError(f"Result(s) for fold(s) {extra} which are not in the plan")

    folds = [by_id[i] for i in sorted(planned)]
    problems = [
        ConfigurationProblem(group_label=contract_label(p.group_label), message=str(p))
        for p in plan.problems
    ]

    report = CrossValidationReport(
        strategy=strategy,
        algo=algo,
        n_groups=int(n_groups if n_groups is not None else len(plan.expected_groups)),
        seed=seed,
        folds=folds,
        configuration_errors=problems,
        notes=list(notes),
    )
    logger.debug("Aggregated %d fold result(s) for %s", len(folds), strategy)
    return report
