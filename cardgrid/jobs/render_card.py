"""
Render a card from a JSON file.

The JSON file holds one card's fields (the same shape the HTTP API accepts)
and may carry its art inline under "art". Art can also come from a separate
file with --art. With --validate-art, only the art dimensions are checked.

Exit status is 0 on success and 1 on a known failure, an invalid card file
or a file that cannot be read.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from cardgrid.config import ART_HEIGHT, ART_WIDTH, settings
from cardgrid.models.failure import KnownError
from cardgrid.models.payload import CardPayload
from cardgrid.services.art_normalizer import validate_dimensions
from cardgrid.services.card_composer import render_card

logger = logging.getLogger(__name__)


def load_card_file(path: Path) -> tuple[CardPayload, str | None]:
    """
    Read a card JSON file.

    Returns:
        The validated payload and the inline art, if any
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    art = data.pop("art", None)
    data.setdefault("rarity", settings.default_rarity)
    return CardPayload.model_validate(data), art


def run(card_path: Path, art_path: Path | None = None, validate_only: bool = False) -> str:
    """
    Render (or just validate the art of) a card file.

    Returns:
        The rendered card, or a short confirmation when validate_only is set

    Raises:
        KnownError: If the art or card text is rejected
        ValidationError: If the card file does not hold a valid card
        OSError: If the card or art file cannot be read
        ValueError: If validate_only is set and there is no art
    """
    payload, art = load_card_file(card_path)
    if art_path is not None:
        art = art_path.read_text(encoding="utf-8")

    if validate_only:
        if art is None:
            raise ValueError("No art to validate: pass --art or include 'art' in the card file")
        validate_dimensions(art, ART_WIDTH, ART_HEIGHT)
        return f"Art OK: {ART_WIDTH}x{ART_HEIGHT}"

    logger.info("Rendering %s", card_path)
    return render_card(payload.to_record(), art)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Render a fixed-size terminal card")
    parser.add_argument("card", type=Path, help="Path to the card JSON file")
    parser.add_argument(
        "--art",
        type=Path,
        default=None,
        help="Path to an art file (overrides inline art)",
    )
    parser.add_argument(
        "--validate-art",
        action="store_true",
        help="Only check the art is exactly the required size",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        output = run(args.card, args.art, validate_only=args.validate_art)
    except KnownError as e:
        logger.error("%s", e.message)
        print(e.message, file=sys.stderr)
        return 1
    except (ValidationError, json.JSONDecodeError) as e:
        logger.error("Invalid card file %s: %s", args.card, e)
        print(f"Invalid card file: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error("Cannot read %s: %s", e.filename, e.strerror)
        print(f"Cannot read file: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        logger.error("%s", e)
        print(e, file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
