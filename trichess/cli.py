"""trichess CLI entry point.

Usage:
    trichess store stats             # summarize the persisted Q/N tables
    trichess store reset --yes       # delete the persisted tables
    trichess agents list
    trichess --version
"""
from __future__ import annotations

import logging
from pathlib import Path

import click

from .agents.registry import DEFAULT_AGENT, list_agents
from .learning.config import load_learning_config
from .learning.store import LearningStore
from . import __version__

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)


def _open_store(learning_dir: str | None) -> LearningStore:
    path = Path(learning_dir) if learning_dir else load_learning_config().learning_dir
    store = LearningStore(path)
    store.load()
    return store


@click.group()
@click.version_option(__version__, prog_name="trichess")
def main():
    """trichess — tabular Q-learning agent for three-player chess."""


@main.group()
def store():
    """Learning store commands."""


@store.command("stats")
@click.option("--dir", "learning_dir", default=None, type=click.Path(file_okay=False), help="Learning dir (default: from configs/learning.toml)")
@click.option("--top", default=5, show_default=True, help="Number of most-visited pairs to show")
def store_stats(learning_dir, top):
    """Summarize the persisted utility and visit-count tables."""
    s = _open_store(learning_dir)
    click.echo(f"Learning dir:  {s.learning_dir}")
    click.echo(f"  Q entries:   {len(s.q)}")
    click.echo(f"  N entries:   {len(s.n)}")
    click.echo(f"  Mean Q:      {s.utility_estimate():.4f}")
    if s.n and top > 0:
        click.echo("  Most visited:")
        ranked = sorted(s.n.items(), key=lambda kv: kv[1], reverse=True)[:top]
        for key, visits in ranked:
            move = "-".join(key.action) if key.action else "terminal"
            click.echo(f"    {move:<12} visits={visits:<6} q={s.get_q(key):.4f}")


@store.command("reset")
@click.option("--dir", "learning_dir", default=None, type=click.Path(file_okay=False), help="Learning dir (default: from configs/learning.toml)")
@click.option("--yes", is_flag=True, help="Do not prompt for confirmation")
def store_reset(learning_dir, yes):
    """Delete the persisted utility and visit-count tables."""
    s = _open_store(learning_dir)
    if not yes:
        click.confirm(f"Delete {len(s.q)} Q entries and {len(s.n)} N entries?", abort=True)
    s.clear()
    click.echo(f"Cleared learning store at {s.learning_dir}")


@main.group()
def agents():
    """Agent registry commands."""


@agents.command("list")
def agents_list():
    """List all registered agents."""
    click.echo("Registered agents:")
    for name in list_agents():
        marker = "*" if name == DEFAULT_AGENT else " "
        click.echo(f"  {marker}  {name}")
