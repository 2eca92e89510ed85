"""Entry point for autoline.

Usage:
    autoline                          # builtin English dictionary
    autoline --dictionary words.txt   # whitespace-separated word list
    autoline --debug                  # verbose log file
"""
import sys
import logging
import argparse
from pathlib import Path

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, filename=None):
    level = logging.DEBUG if debug else logging.INFO
    kwargs = {}
    if filename:
        # curses owns the terminal while the editor runs
        Path(filename).expanduser().parent.mkdir(parents=True, exist_ok=True)
        kwargs["filename"] = str(Path(filename).expanduser())
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        **kwargs,
    )


def load_dictionary(config, path=None, language=None, size=None):
    """Build the dictionary from a word list file, else from the builtin list."""
    from autoline.dictionary import Dictionary

    if path is None:
        path = config.dictionary_path
    if path is not None:
        return Dictionary.from_file(path)
    return Dictionary.from_builtin(
        language=language if language is not None else config.builtin_language,
        size=size if size is not None else config.builtin_size,
    )


def run(config, dictionary) -> str:
    from autoline.editor import Editor
    from autoline.terminal import Terminal

    editor = Editor(dictionary, show_status=config.show_status)
    with Terminal(poll_timeout_ms=config.poll_timeout_ms) as terminal:
        return editor.run(terminal)


def main(argv=None):
    from autoline.config import Config
    from autoline.dictionary import DictionaryError

    parser = argparse.ArgumentParser(description="Terminal line editor with autocorrection")
    parser.add_argument("--dictionary", metavar="PATH",
                        help="Whitespace-separated word list (default: builtin list)")
    parser.add_argument("--language",
                        help="Builtin dictionary language (default: from config)")
    parser.add_argument("--size", type=int,
                        help="Number of most frequent builtin words to load")
    parser.add_argument("--config", metavar="PATH",
                        help="Config file (default: ~/.config/autoline/config.json)")
    parser.add_argument("--debug", action="store_true",
                        help="Log debug messages")
    args = parser.parse_args(argv)

    config = Config(args.config)
    setup_logging(args.debug or config.debug_logging, config.log_file)

    try:
        dictionary = load_dictionary(config, args.dictionary, args.language, args.size)
    except DictionaryError as e:
        logger.error("Cannot start: %s", e)
        print(f"autoline: {e}", file=sys.stderr)
        sys.exit(1)

    run(config, dictionary)


if __name__ == "__main__":
    main()
