"""
Command-line interface for tweet-secret.
"""

import logging
import sys
from typing import Optional, Tuple

import click

from .config import TweetSecretConfig
from .core import TweetSecret
from .errors import ConfigurationError, CorpusTooSmallError
from .report import format_results


def main():
    """Main CLI entry point."""
    cli()


def _setup_logging(verbose: bool) -> None:
    # Set root logger to WARNING to suppress most third-party noise
    logging.basicConfig(
        level=logging.WARNING,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Configure our application logger based on verbose flag
    app_logger = logging.getLogger("tweet_secret")
    app_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Suppress noisy HTTP client logs unless in verbose mode
    third_party_level = logging.WARNING if verbose else logging.ERROR
    logging.getLogger("urllib3").setLevel(third_party_level)
    logging.getLogger("requests").setLevel(third_party_level)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("message", nargs=-1)
@click.option(
    "--corpus",
    "-c",
    multiple=True,
    help="REQUIRED: at least one url or full path filename of the secret corpus text(s) known only by you and your friends",
)
@click.option(
    "--decode",
    "-d",
    multiple=True,
    help="Decode this tweet into plaintext (if none present, text after all the option switches will be encoded)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
    help="config.properties file with tweet-size, excess-marker, dictionary-files, corpus-parse-fn and tokenize-fn",
)
@click.option("--marker", "-m", help="Excess marker (overrides the config file)")
@click.option("--tweet-size", "-s", type=int, help="Maximum tweet length, marker included (overrides the config file)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx,
    message: Tuple[str, ...],
    corpus: Tuple[str, ...],
    decode: Tuple[str, ...],
    config_path: Optional[str],
    marker: Optional[str],
    tweet_size: Optional[int],
    verbose: bool,
):
    """tweet-secret: Text steganography optimized for Twitter.

    MESSAGE: the words to encode, each one a line of the shared dictionary
    """
    _setup_logging(verbose)

    try:
        config = (
            TweetSecretConfig.from_properties(config_path)
            if config_path
            else TweetSecretConfig()
        )
        config = config.with_overrides(excess_marker=marker, tweet_size=tweet_size).validate()
    except ConfigurationError as e:
        click.echo(
            f"\nSorry, the configuration is not defined correctly: {e}. "
            "Please use a non-zero positive integer tweet-size and try again.\n",
            err=True,
        )
        sys.exit(1)

    if not corpus:
        click.echo(ctx.get_help(), err=True)
        sys.exit(2)

    try:
        stego = TweetSecret.from_sources(corpus, config)
    except CorpusTooSmallError as e:
        logging.getLogger("tweet_secret").debug(str(e))
        click.echo(
            "\nSorry, your corpus text is not large enough. Please use a larger text, "
            "or, include additional --corpus options and try again.\n",
            err=True,
        )
        sys.exit(1)

    if decode:
        results = stego.decode(decode)
    else:
        results = stego.encode(stego.tokenize(message))

    for line in format_results(results, show_reason=verbose):
        click.echo(line)


if __name__ == "__main__":
    main()
