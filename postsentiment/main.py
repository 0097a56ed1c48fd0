"""
postsentiment - command line entry

Usage:
    postsentiment run --config config.yaml      # batch pipeline over a posts file
    postsentiment analyze "I love this!"         # analyse a single post
"""

import json
import logging
import time
from typing import Any, Dict

import click

from postsentiment.config import AppConfig, config_to_shared, load_config, validate_config
from postsentiment.flow import create_analysis_flow
from postsentiment.utils.log import LOG_LEVELS, configure_logging
from postsentiment.utils.nlp import analyze as analyze_text
from postsentiment.utils.nlp import confidence_level, explain

logger = logging.getLogger(__name__)


def run_pipeline(config: AppConfig) -> Dict[str, Any]:
    """Validate ``config``, run the batch flow and return the shared store."""
    validate_config(config)
    shared = config_to_shared(config)

    start_time = time.time()
    logger.info(f"Pipeline start - input: {config.data.input_path}")
    create_analysis_flow().run(shared)
    elapsed = time.time() - start_time
    logger.info(f"Pipeline done in {elapsed:.2f}s")
    return shared


@click.group()
@click.option("--log-level", default=None, type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Override the configured log level")
@click.pass_context
def cli(ctx, log_level):
    """Lexicon-based sentiment analysis for short posts."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level


@cli.command()
@click.option("--config", "-c", "config_path", default="config.yaml", show_default=True,
              type=click.Path(exists=True, dir_okay=False), help="YAML configuration file")
@click.option("--input", "-i", "input_path", default=None, help="Override data.input_path")
@click.option("--output", "-o", "output_path", default=None, help="Override data.output_path")
@click.pass_context
def run(ctx, config_path, input_path, output_path):
    """Analyse every post in the input file and write stats, charts and results."""
    try:
        config = load_config(config_path)
        if input_path:
            config.data.input_path = input_path
        if output_path:
            config.data.output_path = output_path
        configure_logging(ctx.obj.get("log_level") or config.logging.level)
        shared = run_pipeline(config)
    except (ValueError, OSError) as e:
        # json.JSONDecodeError is a ValueError
        raise click.ClickException(str(e) or type(e).__name__)
    summary = shared.get("final_summary", {})
    click.echo(f"Posts analysed: {summary.get('total_posts', 0)}")
    click.echo(f"Dominant sentiment: {summary.get('dominant_sentiment') or 'n/a'}")
    click.echo(f"Charts: {summary.get('charts', 0)}")
    if summary.get("data_saved"):
        click.echo(f"Results saved to: {summary.get('output_path')}")


@cli.command()
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Print the raw result as JSON")
@click.pass_context
def analyze(ctx, text, as_json):
    """Analyse a single TEXT."""
    configure_logging(ctx.obj.get("log_level") or "WARNING")
    result = analyze_text(text)
    if as_json:
        payload = result.to_dict()
        payload["explanation"] = explain(text)
        payload["confidenceLevel"] = confidence_level(result.confidence)
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    click.echo(f"Sentiment: {result.sentiment}")
    click.echo(f"Confidence: {result.confidence * 100:.1f}% ({confidence_level(result.confidence)})")
    click.echo(
        "Scores: positive {:.2f} / negative {:.2f} / neutral {:.2f}".format(
            result.scores.positive, result.scores.negative, result.scores.neutral
        )
    )
    click.echo(f"Words: {result.word_count}")
    click.echo(explain(text).strip())


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
