"""CLI interface for wordrank."""

import time
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from wordrank.config import Settings, load_settings
from wordrank.engine import multinomial
from wordrank.exceptions import ConfigError
from wordrank.logger import configure_logging
from wordrank.ranker import Alphabet, LetterMultiset, PermutationRanker, RankResult
from wordrank.validation import ValidationResult, usage_hint, validate_words

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

console = Console()

CONFIG_ERROR_EXIT = 0x20  # one bit past the input error flags


def print_errors(result: ValidationResult, settings: Settings) -> None:
    """Print every triggered validation error followed by the usage line."""
    console.print()
    for message in result.messages():
        console.print(f"[red]{message}[/red]")
    console.print(usage_hint(settings))


def print_explanation(result: RankResult) -> None:
    """Show the penalty added at each position."""
    table = Table(title=f"Rank of {result.word}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Letter", style="bold cyan")
    table.add_column("Skipped")
    table.add_column("Penalty", justify="right")

    for step in result.steps:
        table.add_row(
            str(step.position + 1),
            step.letter,
            "".join(step.skipped) or "-",
            str(step.penalty),
        )

    console.print(table)
    console.print(f"[dim]1 + {sum(s.penalty for s in result.steps)} = {result.rank} (of {result.total})[/dim]")


def _validated_word(ctx: click.Context, words: tuple[str, ...]) -> str:
    """Validate the words argument or exit with the error bitmask."""
    settings = ctx.obj["settings"]
    result = validate_words(words, settings)
    if not result.ok:
        print_errors(result, settings)
        ctx.exit(int(result.errors))
    return result.word


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Path to configuration file (default: config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log ranking progress to stderr")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """Find the rank of a word among all rearrangements of its letters.

    Every distinct ordering of the letters counts as a word, whether it is
    in a dictionary or not.  Listing them alphabetically, the first one has
    rank 1.
    """
    ctx.ensure_object(dict)
    try:
        settings = load_settings(config)
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        ctx.exit(CONFIG_ERROR_EXIT)

    configure_logging("DEBUG" if verbose else settings.logging.level, settings.logging.file)
    ctx.obj["settings"] = settings


@cli.command("rank", context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1)
@click.option("--explain", "-e", is_flag=True, help="Show the penalty at each position")
@click.option("--timing", "-t", is_flag=True, help="Show elapsed time")
@click.pass_context
def rank_command(ctx: click.Context, words: tuple[str, ...], explain: bool, timing: bool) -> None:
    """Print the rank of WORD.

    WORD must be a single word of 1-25 capital letters.  On invalid input
    every problem is listed and the exit status is the sum of the error
    codes: 1 too many words, 2 too many letters, 4 too few letters,
    8 too few words, 16 invalid characters.

    Examples:
        wordrank rank BOOKKEEPER
        wordrank rank --explain BCA
    """
    settings = ctx.obj["settings"]
    explain = explain or settings.output.explain
    timing = timing or settings.output.timing

    start = time.perf_counter()
    word = _validated_word(ctx, words)

    ranker = PermutationRanker.from_settings(settings)
    result = ranker.rank(word)
    elapsed_ms = (time.perf_counter() - start) * 1000

    console.print(str(result.rank))

    if explain:
        print_explanation(result)
    if not result.fits_uint64:
        console.print("[yellow]Rank does not fit in an unsigned 64-bit integer.[/yellow]")
    if timing:
        console.print(f"[dim]Elapsed time: {elapsed_ms:.3f} ms[/dim]")


@cli.command("total", context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1)
@click.pass_context
def total_command(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Print how many distinct words the letters of WORD can form.

    This is also the rank of the letters in descending order.

    Examples:
        wordrank total BOOKKEEPER
    """
    settings = ctx.obj["settings"]
    word = _validated_word(ctx, words)

    multiset = LetterMultiset.from_word(word, Alphabet(settings.ranking.alphabet))
    console.print(str(multinomial(len(word), multiset.degrees())))


@cli.command("info")
def show_info() -> None:
    """Explain how the rank is computed."""
    console.print("\n[bold]How word ranks are computed[/bold]\n")

    sections = [
        (
            "Counting rearrangements",
            "A word of n letters with no repeats has n! orderings. When letters repeat, "
            "swapping equal letters gives the same word, so divide by the factorial of "
            "each letter's count. AAAB has 4!/3! = 4 words, AABB has 4!/(2! x 2!) = 6.",
            "total = n! / (r1! x r2! x ... x rk!)",
        ),
        (
            "Walking the word",
            "Alphabetize the letters. At each position, every remaining letter that sorts "
            "before the word's letter could have started a smaller word; add the number of "
            "arrangements of the rest of the suffix for each one. Then remove the matched "
            "letter and move on. BCA: A before B adds 2!, A before C adds 1!, so 1 + 3 = 4.",
            "penalty = (m - 1)! / (r1! x ... x rk!)  for each skipped letter",
        ),
        (
            "Avoiding overflow",
            "Factorials above 20! do not fit in 64 bits. The numerator and denominator "
            "factorials are expanded and common factors are cancelled before multiplying. "
            "Leftover fractions are carried and added once at the end.",
            "BOOKKEEPER: 1 + 8400 + 2100 + 180 + 60 + 2 = 10743",
        ),
    ]

    for name, desc, formula in sections:
        console.print(Panel(
            f"[dim]{desc}[/dim]\n\n[cyan]Formula:[/cyan] {formula}",
            title=f"[bold]{name}[/bold]",
            border_style="blue",
        ))
        console.print()


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
