import argparse
import json
import logging
import time
from typing import Optional, Sequence

import requests

from analysis_service import AnalysisService, label
from config import YamlConfig, load_thresholds
from localization import translator
from models import ActivityLevel, GoalDirection, Sex


def bmr_report(
    service: AnalysisService,
    weight: float,
    height: float,
    age: int,
    sex: str,
    activity_level: Optional[str] = None,
) -> dict:
    bmr = service.metabolic.estimate_bmr(weight, height, age, sex)
    result = {"bmr": round(bmr, 2)}
    if activity_level:
        result["tdee"] = round(service.metabolic.estimate_tdee(bmr, activity_level), 2)
    return result


def goal_report(
    service: AnalysisService,
    current: float,
    target: float,
    initial: float = 0.0,
    direction: str = GoalDirection.INCREASE.value,
) -> dict:
    progress = service.progress.goal_progress(current, initial, target, direction)
    return {"progress": round(progress, 4), "advice": label(service.progress.advice(progress))}


def benchmark(
    url: str,
    runs: int = 10,
    endpoint: str = "/health",
    session: Optional[requests.Session] = None,
) -> dict:
    """Time repeated GETs against a running analytics server."""
    if runs <= 0:
        raise ValueError("runs must be positive")
    session = session or requests.Session()
    times: list[float] = []
    for _ in range(runs):
        t0 = time.perf_counter()
        session.get(f"{url.rstrip('/')}{endpoint}", timeout=5).raise_for_status()
        times.append(time.perf_counter() - t0)
    return {
        "endpoint": endpoint,
        "runs": runs,
        "average_seconds": round(sum(times) / runs, 4),
        "slowest_seconds": round(max(times), 4),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fitness analytics commands")
    parser.add_argument("--config", default=None, help="threshold YAML file")
    parser.add_argument("--lang", default="en", choices=sorted(translator.translations))
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    bmr = sub.add_parser("bmr")
    bmr.add_argument("--weight", type=float, required=True)
    bmr.add_argument("--height", type=float, required=True)
    bmr.add_argument("--age", type=int, required=True)
    bmr.add_argument("--sex", choices=[s.value for s in Sex], required=True)
    bmr.add_argument("--activity", choices=[a.value for a in ActivityLevel])

    macros = sub.add_parser("macros")
    macros.add_argument("--protein", type=float, required=True)
    macros.add_argument("--carbs", type=float, required=True)
    macros.add_argument("--fat", type=float, required=True)

    goal = sub.add_parser("goal")
    goal.add_argument("--current", type=float, required=True)
    goal.add_argument("--target", type=float, required=True)
    goal.add_argument("--initial", type=float, default=0.0)
    goal.add_argument(
        "--direction",
        choices=[d.value for d in GoalDirection],
        default=GoalDirection.INCREASE.value,
    )

    thresholds = sub.add_parser("thresholds")
    thresholds.add_argument("--out", default="thresholds.yaml")

    serve = sub.add_parser("serve")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    bench = sub.add_parser("benchmark")
    bench.add_argument("--url", default="http://localhost:8000")
    bench.add_argument("--runs", type=int, default=10)
    bench.add_argument("--endpoint", default="/health")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    translator.set_language(args.lang)

    if args.cmd == "serve":
        import uvicorn

        from rest_api import FitnessAPI

        uvicorn.run(FitnessAPI(config_path=args.config).app, host=args.host, port=args.port)
        return
    if args.cmd == "benchmark":
        result = benchmark(args.url, args.runs, args.endpoint)
        print(json.dumps(result, indent=2))
        return

    service = AnalysisService(load_thresholds(args.config))
    if args.cmd == "bmr":
        result = bmr_report(
            service, args.weight, args.height, args.age, args.sex, args.activity
        )
    elif args.cmd == "macros":
        result = service.macro_report(service.macros.analyze(args.protein, args.carbs, args.fat))
    elif args.cmd == "goal":
        result = goal_report(service, args.current, args.target, args.initial, args.direction)
    else:
        YamlConfig(args.out).save_thresholds(service.thresholds)
        result = {"written": args.out}
    print(json.dumps(result, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
