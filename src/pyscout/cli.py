"""Command-line interface for training the predictor and scoring athletes."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path

from pyscout.config import ScoringSettings
from pyscout.errors import ScoringEngineError
from pyscout.ingest import load_examples_from_csv
from pyscout.network import Predictor, TrainingConfig, train
from pyscout.scoring import ScoringEngine


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score athletes and recommend positions")
    parser.add_argument("--log-level", default="INFO", help="Logging level (e.g., DEBUG, INFO)")
    parser.add_argument("--dataset", type=Path, default=None, help="Training dataset CSV")
    parser.add_argument("--weights", type=Path, default=None, help="Trained weights JSON")
    subparsers = parser.add_subparsers(dest="command", required=True)

    train_parser = subparsers.add_parser("train", help="Train the predictor and save its weights")
    train_parser.add_argument("--output", type=Path, required=True, help="Where to write the weights JSON")
    train_parser.add_argument("--max-iterations", type=int, default=None, help="Iteration cap")
    train_parser.add_argument("--patience", type=int, default=None, help="Early stopping patience")
    train_parser.add_argument("--learning-rate", type=float, default=None, help="SGD learning rate")
    train_parser.add_argument("--seed", type=int, default=None, help="Random seed for initialization and shuffling")
    train_parser.add_argument("--timeout", type=float, default=None, help="Abort training after this many seconds")

    score_parser = subparsers.add_parser("score", help="Score one athlete")
    score_parser.add_argument(
        "attributes",
        help="Athlete attributes as JSON, or @path to a JSON file",
    )

    recommend_parser = subparsers.add_parser("recommend", help="Recommend a position for a stored score")
    recommend_parser.add_argument("score", type=float, help="Stored athlete score")
    recommend_parser.add_argument("positions", nargs="+", help="Natural position labels, primary first")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    return parser.parse_args(argv)


def _load_attributes(raw: str) -> dict:
    text = Path(raw[1:]).read_text(encoding="utf-8") if raw.startswith("@") else raw
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid attributes JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit("Attributes JSON must be an object")
    return data


def _settings_from_args(args: argparse.Namespace) -> ScoringSettings:
    settings = ScoringSettings.from_env()
    if args.dataset is not None:
        settings = replace(settings, dataset_path=args.dataset)
    if args.weights is not None:
        settings = replace(settings, weights_path=args.weights)
    return settings


def _run_train(args: argparse.Namespace, settings: ScoringSettings) -> None:
    overrides = {
        key: value
        for key, value in {
            "max_iterations": args.max_iterations,
            "patience": args.patience,
            "learning_rate": args.learning_rate,
            "seed": args.seed,
            "timeout": args.timeout,
        }.items()
        if value is not None
    }
    config = TrainingConfig.from_settings(settings, **overrides)
    examples = load_examples_from_csv(settings.dataset_path)
    predictor = Predictor()
    report = train(predictor, examples, config)
    predictor.snapshot().save(args.output)
    print(f"Saved weights to {args.output}")
    print(json.dumps(asdict(report), indent=2))


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = _settings_from_args(args)

    try:
        if args.command == "train":
            _run_train(args, settings)
        elif args.command == "score":
            attributes = _load_attributes(args.attributes)
            engine = ScoringEngine.from_settings(settings)
            print(json.dumps(engine.compute_score(attributes).to_dict(), indent=2))
        elif args.command == "recommend":
            engine = ScoringEngine(settings=settings)
            result = engine.recommend(args.score, args.positions)
            print(json.dumps(result.model_dump(mode="json"), indent=2))
        elif args.command == "serve":
            import uvicorn

            from pyscout.api import create_app

            uvicorn.run(create_app(settings=settings), host=args.host, port=args.port)
    except ScoringEngineError as exc:
        print(json.dumps(exc.to_dict(), indent=2), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
