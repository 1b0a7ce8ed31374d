"""Simple entrypoint to run the FitStyle recommender locally."""

from __future__ import annotations

import argparse
from dataclasses import replace

from fitstyle_app.app import FitStyleApp
from fitstyle_app.config import AppConfig
from logic.outfit_builder import harmony_headline


def main() -> None:
    parser = argparse.ArgumentParser(description="Print outfit suggestions for the demo wardrobe")
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory holding saved_looks.json and preferences.json.",
    )
    parser.add_argument(
        "--filter",
        default=None,
        help="Harmony filter: All, Complementary, Analogous or Neutral.",
    )
    parser.add_argument(
        "--skip-self-test",
        action="store_true",
        help="Do not run the saved-look persistence self-test.",
    )
    args = parser.parse_args()

    config = AppConfig.from_env()
    if args.data_dir:
        config = replace(config, data_dir=args.data_dir)
    app = FitStyleApp(config)

    for suggestion in app.generate_suggestions(harmony_filter=args.filter):
        labels = ", ".join(item.label for item in suggestion.items)
        print(f"{suggestion.title} [{harmony_headline(suggestion.explanation)}]: {labels}")
        print(f"  {suggestion.explanation}")
    if not args.skip_self_test:
        result = app.run_self_test()
        print(f"Persistence self-test {'passed' if result.passed else 'FAILED'}")


if __name__ == "__main__":
    main()
