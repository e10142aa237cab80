from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException

from schedcore import SchedulerError, compare_all_algorithms

from ..serializers import compute_workload
from ..session import (
    build_table,
    get_settings,
    get_state,
    get_table,
    init_session,
    parse_quantum,
    reset_session,
    run_all_session,
    run_session,
    set_config,
)

router = APIRouter()


@router.get("/health")
def health() -> Dict[str, bool]:
    return {"ok": True}


@router.post("/sim/init")
def sim_init(payload: Dict[str, Any] = Body(default_factory=dict)) -> Dict[str, Any]:
    try:
        return init_session(payload)
    except SchedulerError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/sim/config")
def sim_config(payload: Dict[str, Any] = Body(default_factory=dict)) -> Dict[str, Any]:
    try:
        return set_config(payload)
    except SchedulerError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.get("/sim/state")
def sim_state() -> Dict[str, Any]:
    return get_state()


@router.post("/sim/run")
def sim_run(payload: Dict[str, Any] = Body(default_factory=dict)) -> Dict[str, Any]:
    algorithm = payload.get("algorithm")
    try:
        if algorithm is None:
            return {"results": run_all_session()}
        return run_session(algorithm)
    except SchedulerError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/sim/compare")
def sim_compare(payload: Dict[str, Any] = Body(default_factory=dict)) -> Dict[str, Any]:
    settings = get_settings()
    try:
        if "processes" in payload or "preset" in payload:
            table = build_table(payload)
        else:
            table = get_table()
        rr_quantum = parse_quantum(payload.get("rr_quantum", payload.get("quantum", settings["quantum"])))
        results = compare_all_algorithms(table, rr_quantum=rr_quantum)
    except SchedulerError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    for row in results:
        row["per_process"] = [
            {k.lower(): v for k, v in r.items() if not k.startswith("_")} for r in row.pop("_rows")
        ]
    return {
        "results": results,
        "workload": compute_workload(table),
    }


@router.post("/sim/reset")
def sim_reset() -> Dict[str, Any]:
    return reset_session()
