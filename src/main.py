import argparse
import logging


def format_result(display_text: str, badge: str) -> str:
    return f"{display_text}  [{badge}]" if badge else display_text


def main(argv: list[str] = None):
    parser = argparse.ArgumentParser(description="Recipient Row preview")
    parser.add_argument(
        "recipients",
        nargs="*",
        help="Recipient identifiers, in display order. Comma-separated values are split.",
    )
    parser.add_argument(
        "--width",
        type=float,
        action="append",
        default=None,
        help="Container width in px. Repeat to replay a sequence of resizes.",
    )
    parser.add_argument(
        "--backend",
        choices=["pillow", "fallback"],
        default=None,
        help="Override config measurement.backend.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config file (default: config/config.yaml relative to project root).",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    from src.config import get_badge_metrics, get_style, load_config, setup_logging
    from src.fitter.row import RecipientRow, parse_recipients
    from src.measure import create_measurer

    setup_logging(args.log_level)
    config = load_config(args.config)
    if args.backend:
        config["measurement"]["backend"] = args.backend

    widths = args.width or [config["gui"].get("default_width", 360)]
    recipients = parse_recipients(args.recipients)
    row = RecipientRow(
        create_measurer(config),
        get_style(config),
        get_badge_metrics(config),
        container_width=widths[0],
        recipients=recipients,
    )

    for line in replay_widths(row, widths):
        print(line)


def replay_widths(row, widths: list[float]) -> list[str]:
    """Mount row, emit one resize event per width and collect each rendering."""
    from src.events import RESIZE, EventDispatcher

    logger = logging.getLogger(__name__)
    dispatcher = EventDispatcher()
    lines = []
    with row.mounted(dispatcher):
        for width in widths:
            dispatcher.emit(RESIZE, width)
            logger.info("Width %spx: %d hidden", width, row.hidden_count)
            lines.append(format_result(row.display_text, row.badge))
    return lines


if __name__ == "__main__":
    main()
