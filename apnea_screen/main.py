import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from apnea_screen.classification.classifier import Classifier
from apnea_screen.classification.factory import ClassificationClientFactory
from apnea_screen.config.settings import Settings
from apnea_screen.ecg.analyzer import EcgAnalysisSession, EcgAnalyzer
from apnea_screen.ecg.exceptions import FileReadError
from apnea_screen.logging.logger import Log
from apnea_screen.presentation.render import (
    SERVICE_ALERT,
    render_prediction,
    render_risk,
    render_series,
)
from apnea_screen.risk.exceptions import InvalidProfileError
from apnea_screen.risk.models import Gender, HealthProfile
from apnea_screen.risk.scoring import calculate_risk
from apnea_screen.server.session_store import build_session_store
from apnea_screen.server.waker import ServerWaker

AGE_RANGE = (10, 100)
HEIGHT_RANGE_CM = (100, 250)
WEIGHT_RANGE_KG = (30, 200)


def _bounded(
    kind: Callable[[str], float], low: float, high: float
) -> Callable[[str], float]:
    def parse(raw: str) -> float:
        try:
            value = kind(raw)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid number: {raw!r}") from None
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"must be between {low} and {high}")
        return value

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apnea-screen",
        description="Sleep apnea screening from ECG uploads or a short questionnaire.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    ecg = sub.add_parser("ecg", help="Analyze an ECG CSV file")
    ecg.add_argument("file", type=Path, help="CSV with one sample per line, optional 'ecg' header")

    risk = sub.add_parser("risk", help="Estimate risk from a health questionnaire")
    risk.add_argument("--age", type=_bounded(int, *AGE_RANGE), required=True)
    risk.add_argument("--gender", choices=[g.value for g in Gender], default=Gender.MALE.value)
    risk.add_argument("--height", type=_bounded(float, *HEIGHT_RANGE_CM), required=True, help="cm")
    risk.add_argument("--weight", type=_bounded(float, *WEIGHT_RANGE_KG), required=True, help="kg")
    risk.add_argument("--snoring", action="store_true", help="Do you snore?")
    risk.add_argument("--tired", action="store_true", help="Do you often feel tired during the day?")
    risk.add_argument(
        "--observed", action="store_true",
        help="Has anyone observed you stop breathing during sleep?",
    )
    risk.add_argument("--high-bp", action="store_true", help="Do you have high blood pressure?")

    wake = sub.add_parser("wake", help="Wake the inference service")
    wake.add_argument(
        "--wait", type=float, default=None, metavar="SECONDS",
        help="Give up after SECONDS (default: keep polling until online)",
    )
    return parser


def run_ecg(args: argparse.Namespace, settings: Settings) -> int:
    client = ClassificationClientFactory.create(settings)
    session = EcgAnalysisSession(EcgAnalyzer(Classifier(client)))
    try:
        analysis = session.upload(args.file)
    except FileReadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        client.close()
    print(f"Selected: {analysis.file_name}")
    print(render_series(analysis.series))
    if analysis.prediction is not None:
        print(render_prediction(analysis.prediction))
    return 0


def run_risk(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        profile = HealthProfile(
            age=args.age,
            gender=Gender(args.gender),
            height_cm=args.height,
            weight_kg=args.weight,
            snoring=args.snoring,
            tired=args.tired,
            observed_apnea=args.observed,
            high_blood_pressure=args.high_bp,
        )
    except InvalidProfileError as exc:
        parser.error(str(exc))
    print(render_risk(calculate_risk(profile)))
    return 0


def run_wake(args: argparse.Namespace, settings: Settings) -> int:
    client = ClassificationClientFactory.create(settings)
    waker = ServerWaker(
        client,
        build_session_store(settings.session_file),
        poll_interval_seconds=settings.wake_poll_interval_seconds,
    )
    try:
        if not waker.needs_prompt():
            print("Inference service already awake for this session.")
            return 0
        print(SERVICE_ALERT)
        waker.start()
        if waker.wait_until_online(args.wait):
            print("Connected to backend server.")
            return 0
        print(f"Service still waking after {args.wait:g}s.")
        return 1
    finally:
        client.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse args -> configure logging -> dispatch."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    if args.command == "ecg":
        return run_ecg(args, settings)
    if args.command == "risk":
        return run_risk(args, parser)
    return run_wake(args, settings)


if __name__ == "__main__":
    sys.exit(main())
