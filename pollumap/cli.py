"""
PolluMap CLI - run the causal pollution simulation from the terminal
"""
import click
from rich.console import Console
from rich.table import Table

from pollumap import __version__
from pollumap.engine import SimulationEngine
from pollumap.models import CauseCategory
from pollumap.regions.baselines import RandomBaselineGenerator
from pollumap.regions.geojson import read_features
from pollumap.settings import settings
from pollumap.simulation.classifier import classify, classify_reading
from pollumap.simulation.evaluator import composite_toxicity
from pollumap.utils import PolluMapError, get_logger, setup_logging

console = Console()
logger = get_logger(__name__)

_CATEGORY_CHOICE = click.Choice([c.value for c in CauseCategory])


# ═══════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════

def _parse_assignments(assignments):
    """Split ``agent=value`` strings into (agent, value) pairs."""
    parsed = []
    for item in assignments:
        agent_id, sep, raw = item.partition("=")
        if not sep or not agent_id:
            raise click.BadParameter(f"expected AGENT=VALUE, got '{item}'", param_hint="--set")
        try:
            parsed.append((agent_id.strip(), float(raw)))
        except ValueError:
            raise click.BadParameter(f"'{raw}' is not a number", param_hint="--set") from None
    return parsed


def _build_engine(geojson, assignments, seed):
    engine = SimulationEngine(baseline_provider=RandomBaselineGenerator(seed))
    engine.load_regions(read_features(geojson))
    for agent_id, value in _parse_assignments(assignments):
        engine.update_multiplier(agent_id, value)
    return engine


def _fail(error):
    console.print(f"\n[red]✗ Error: {error}[/red]")
    raise SystemExit(1)


# ═══════════════════════════════════════════════════════════════════
# MAIN CLI GROUP
# ═══════════════════════════════════════════════════════════════════

@click.group()
@click.version_option(version=__version__)
@click.option('--log-level', default=None, help='Override POLLUMAP_LOG_LEVEL')
def main(log_level):
    """
    PolluMap - causal pollution simulation for Delhi wards

    Scale baseline air, water and soil readings by causative agent
    multipliers and classify the results into severity tiers.
    """
    setup_logging(log_level or settings.log_level, settings.log_file)


@main.command()
def agents():
    """List causative agents and their weights"""
    engine = SimulationEngine()

    table = Table(title="Causative Agents")
    table.add_column("Category", style="cyan")
    table.add_column("Agent")
    table.add_column("Label")
    table.add_column("Weight", justify="right", style="magenta")

    for category in CauseCategory:
        for agent in engine.registry.agents_for(category):
            table.add_row(category.value, agent.id, agent.label, f"{agent.weight:.2f}")

    console.print(table)


@main.command(name="classify")
@click.argument('category', type=_CATEGORY_CHOICE)
@click.argument('value', type=float)
def classify_value(category, value):
    """Classify a VALUE for CATEGORY into its severity tier"""
    tier = classify(category, value)
    suffix = "" if tier.present else " (not present)"
    console.print(f"{category} {value:g} -> tier {tier.level} [bold]{tier.label}[/bold]{suffix}")


# ═══════════════════════════════════════════════════════════════════
# SIMULATION COMMANDS
# ═══════════════════════════════════════════════════════════════════

@main.command()
@click.argument('geojson', type=click.Path(exists=True, dir_okay=False))
@click.option('--set', 'assignments', multiple=True, metavar='AGENT=VALUE',
              help='Agent multiplier between 0.5 and 3.0 (repeatable)')
@click.option('--seed', type=int, default=None, help='Seed for generated baselines')
@click.option('--category', type=_CATEGORY_CHOICE, default=None, help='Show one category only')
def simulate(geojson, assignments, seed, category):
    """Simulate every region in GEOJSON under the given multipliers"""
    seed = settings.baseline_seed if seed is None else seed
    try:
        engine = _build_engine(geojson, assignments, seed)
    except PolluMapError as e:
        _fail(e)

    categories = [CauseCategory(category)] if category else list(CauseCategory)
    factors = engine.current_factors()
    console.print(
        "\n[bold blue]Factors:[/bold blue] "
        + ", ".join(f"{c.value}={factors[c]:.3f}" for c in CauseCategory)
    )

    table = Table(title=f"Simulated Regions ({len(engine.regions)})")
    table.add_column("Region", style="cyan")
    table.add_column("Kind")
    for c in categories:
        table.add_column(c.value.capitalize(), justify="right")
    table.add_column("Toxicity", justify="right", style="magenta")

    for region in engine.regions:
        reading = engine.simulate(region)
        tiers = classify_reading(reading)
        table.add_row(
            region.id,
            region.kind.value,
            *[f"{reading.value(c)} ({tiers[c].label})" for c in categories],
            str(composite_toxicity(reading)),
        )

    console.print(table)


@main.command()
@click.argument('geojson', type=click.Path(exists=True, dir_okay=False))
@click.argument('region_id')
@click.option('--set', 'assignments', multiple=True, metavar='AGENT=VALUE',
              help='Agent multiplier between 0.5 and 3.0 (repeatable)')
@click.option('--seed', type=int, default=None, help='Seed for generated baselines')
def inspect(geojson, region_id, assignments, seed):
    """Select REGION_ID and show its snapshot"""
    seed = settings.baseline_seed if seed is None else seed
    try:
        engine = _build_engine(geojson, assignments, seed)
    except PolluMapError as e:
        _fail(e)

    if not engine.select_by_id(region_id):
        _fail(f"Region '{region_id}' is unknown or not selectable")

    selection = engine.selection
    tiers = classify_reading(selection.snapshot)

    table = Table(title=f"{selection.region.id.upper()}")
    table.add_column("Category", style="cyan")
    table.add_column("Baseline", justify="right")
    table.add_column("Factor", justify="right")
    table.add_column("Simulated", justify="right", style="magenta")
    table.add_column("Tier")

    for c in CauseCategory:
        table.add_row(
            c.value,
            str(selection.region.baseline.value(c)),
            f"{selection.factors[c]:.3f}",
            str(selection.snapshot.value(c)),
            f"{tiers[c].level} {tiers[c].label}",
        )

    console.print(table)
    console.print(f"Composite toxicity: [bold]{composite_toxicity(selection.snapshot)}[/bold]")


if __name__ == '__main__':
    main()
