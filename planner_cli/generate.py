"""Generate a workout plan from a profile file or command-line answers.

Usage:
    python -m planner_cli.generate --profile profiles/me.json
    python -m planner_cli.generate --goal bulk --level beginner \
        --equipment dumbbells --minutes 45 --format table
"""

from __future__ import annotations

import argparse
import logging
import sys

from workout_engine.entitlements import can_create_plan
from workout_engine.exceptions import InvalidProfileError
from workout_engine.models.profile import UserProfile
from workout_engine.plan_generator import generate_workout_plan
from workout_engine.profiles import build_user_profile, load_profile
from workout_engine.serialization import plan_to_frame, plan_to_json_string

from planner_cli.config import LOG_LEVEL, MAX_FREE_PLANS, OUTPUT_FORMAT, PROFILE_PATH

logger = logging.getLogger(__name__)

EXIT_INVALID_PROFILE = 2
EXIT_PLAN_LIMIT = 3

OUTPUT_FORMATS = ("json", "table")


def _default_format() -> str:
    """FITPLAN_OUTPUT_FORMAT, or json when it names an unknown format."""
    fmt = OUTPUT_FORMAT.strip().lower()
    if fmt not in OUTPUT_FORMATS:
        logger.warning(
            "Unknown FITPLAN_OUTPUT_FORMAT %r; expected one of %s. Falling back to json",
            OUTPUT_FORMAT,
            ", ".join(OUTPUT_FORMATS),
        )
        return "json"
    return fmt


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a weekly workout plan")
    parser.add_argument(
        "--profile",
        help=f"Questionnaire answers as JSON (default: {PROFILE_PATH})",
    )
    parser.add_argument("--goal", help="bulk, cut or maintain")
    parser.add_argument("--level", help="beginner or intermediate")
    parser.add_argument(
        "--equipment",
        action="append",
        default=[],
        help="Available equipment; repeat for several (dumbbells, 'resistance bands', gym)",
    )
    parser.add_argument("--minutes", type=int, help="Desired session length in minutes")
    parser.add_argument("--weight", type=float, help="Body weight in kg")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=_default_format(),
        help="Output format",
    )
    parser.add_argument(
        "--existing-plans",
        type=int,
        default=0,
        help="Plans already saved by this user (free-tier limit check)",
    )
    parser.add_argument(
        "--premium", action="store_true", help="User has a premium subscription",
    )
    return parser


def _resolve_profile(args: argparse.Namespace) -> UserProfile:
    """Flags win when --goal is given; otherwise read a profile file."""
    if args.goal is not None:
        answers = {
            "goal": args.goal,
            "level": args.level,
            "equipment": args.equipment,
            "workoutMinutes": args.minutes,
        }
        if args.weight is not None:
            answers["weight"] = args.weight
        return build_user_profile(answers)
    return load_profile(args.profile or PROFILE_PATH)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = _build_parser().parse_args(argv)

    if not can_create_plan(args.premium, args.existing_plans, MAX_FREE_PLANS):
        logger.error(
            "Free plan limit reached (%d/%d); upgrade to premium for more plans",
            args.existing_plans,
            MAX_FREE_PLANS,
        )
        return EXIT_PLAN_LIMIT

    try:
        profile = _resolve_profile(args)
    except FileNotFoundError as exc:
        logger.error("Profile not found at %s", exc.filename)
        return EXIT_INVALID_PROFILE
    except InvalidProfileError as exc:
        logger.error("Invalid profile: %s", exc)
        return EXIT_INVALID_PROFILE

    plan = generate_workout_plan(profile)
    logger.info(
        "Generated %s with %d days (%s)", plan.name, plan.days_per_week, plan.level.value,
    )

    if args.format == "table":
        print(plan_to_frame(plan).to_string(index=False))
    else:
        print(plan_to_json_string(plan))
    return 0


if __name__ == "__main__":
    sys.exit(main())
