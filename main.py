"""Command line entrypoint printing a suggestion page for a user."""

import argparse
import json

from wardrobe_app.app import WardrobeApp


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print outfit suggestions as JSON.")
    parser.add_argument("user_id")
    parser.add_argument("--page", type=int, default=0)
    parser.add_argument("--size", type=int, default=None)
    parser.add_argument("--tag", dest="tag_id", default=None)
    args = parser.parse_args(argv)

    app = WardrobeApp()
    size = args.size if args.size is not None else app.config.default_page_size
    response = app.suggestions.suggest(user_id=args.user_id, page=args.page, size=size, tag_id=args.tag_id)
    print(json.dumps(response, indent=2, default=str))


if __name__ == "__main__":
    main()
