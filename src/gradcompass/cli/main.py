"""
CLI Main - Typer command-line interface.
========================================

Commands:
- suggest: Live search suggestions for a query
- search: Filter programs by facets, tuition or free text
- facets: List facet values of the catalog
- program: Show one program
- university: Show a university and its programs
- mentors: List mentors by category
- advise: AI recommendations, essay outlines and ROI analysis
- journey: Local account, shortlist and application set
- info: Show system information
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from gradcompass.shared.logging import get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="gradcompass",
    help="""🎓 GradCompass - Graduate Program Discovery

Search a catalog of graduate and study-abroad programs by degree,
specialization, country, city and university, compare costs, find
mentors and get AI guidance for applications.

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

COMMANDS OVERVIEW:

  suggest     Show live suggestions for a partial query
  search      Filter programs
              -d, --degree / -s, --specialization / -c, --country
              --city / -u, --university / -t, --max-tuition
              -q, --query     Resolve free text like "MBA in Germany"
  facets      List distinct degree, specialization, country, city or
              university values
  program     Show a program with fees, scholarships and placements
  university  Show a university and all its programs
  mentors     List mentors (-c, --category)
  advise      recommend | outline | roi
  journey     register | shortlist | add | remove | apply
              Offline account and shortlist in local files
  info        Show configuration and data file status

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

QUICK START:

  gradcompass suggest "mba in ger"
  gradcompass search -q "MBA in Germany"
  gradcompass search -c India -t 20000

Use 'gradcompass <command> --help' for detailed command options.
""",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

CATALOG_OPTION_HELP = "Program catalog JSON file (default from config)."


def _load_catalog(catalog_file: Optional[Path]):
    """Load the catalog or exit with an error message."""
    from gradcompass.catalog import Catalog, CatalogError

    try:
        return Catalog.from_file(catalog_file)
    except CatalogError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _programs_table(programs, title: Optional[str] = None) -> Table:
    from gradcompass.shared.utils import format_usd

    table = Table(show_header=True, title=title)
    table.add_column("ID", style="cyan")
    table.add_column("University")
    table.add_column("Program")
    table.add_column("Degree")
    table.add_column("Country")
    table.add_column("City")
    table.add_column("Tuition", justify="right")

    for program in programs:
        table.add_row(
            program.id,
            program.university,
            program.program_name,
            program.degree_type,
            program.country,
            program.city,
            format_usd(program.tuition),
        )
    return table


def _show_university(catalog, name: str) -> None:
    from gradcompass.search import university_path

    programs = catalog.by_university(name)
    if not programs:
        console.print(f"[red]University not found: {name}[/red]")
        raise typer.Exit(1)

    headline = programs[0]
    ranking = f"#{headline.qs_ranking}" if headline.qs_ranking else "n/a"
    console.print(Panel(
        f"[bold]{name}[/bold]\n"
        f"{headline.city}, {headline.country}\n"
        f"QS Ranking: {ranking}\n"
        f"[dim]{university_path(name)}[/dim]",
        title="🏛️ University",
    ))
    console.print(_programs_table(programs, title=f"{len(programs)} programs"))


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show debug logging.",
    ),
):
    """GradCompass command-line interface."""
    from gradcompass.shared.logging import setup_logging, setup_logging_from_settings

    setup_logging_from_settings()
    if verbose:
        setup_logging(level="DEBUG", force=True)


# ─────────────────────────────────────────────────────────────────────────────
# Suggest Command
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def suggest(
    query: str = typer.Argument(..., help="Text typed so far."),
    catalog_file: Optional[Path] = typer.Option(
        None,
        "--catalog",
        help=CATALOG_OPTION_HELP,
    ),
):
    """
    🔎 Show live search suggestions for a partial query.

    Combined suggestions (e.g. "MBA in Germany") are listed first,
    followed by single degree, specialization, country, city and
    university matches.

    Examples:
        gradcompass suggest "data"
        gradcompass suggest "mba in germany"
    """
    from gradcompass.search import SuggestionEngine

    catalog = _load_catalog(catalog_file)
    engine = SuggestionEngine(catalog.facet_index)
    suggestions = engine.suggest(query)

    if not suggestions:
        console.print(f"[yellow]No suggestions for '{query}'.[/yellow]")
        return

    table = Table(show_header=True, title=f"Suggestions for '{query}'")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Label", style="bold")
    table.add_column("Type")

    for i, suggestion in enumerate(suggestions, 1):
        table.add_row(
            str(i),
            suggestion.label,
            suggestion.description,
            style="green" if suggestion.is_combined else None,
        )

    console.print(table)


# ─────────────────────────────────────────────────────────────────────────────
# Search Command
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def search(
    degree: Optional[str] = typer.Option(None, "--degree", "-d", help="Degree type, e.g. MBA."),
    specialization: Optional[str] = typer.Option(
        None, "--specialization", "-s", help="Specialization, e.g. Data Science."
    ),
    country: Optional[str] = typer.Option(None, "--country", "-c", help="Country."),
    city: Optional[str] = typer.Option(None, "--city", help="City."),
    university: Optional[str] = typer.Option(None, "--university", "-u", help="University."),
    max_tuition: Optional[float] = typer.Option(
        None,
        "--max-tuition", "-t",
        min=0,
        help="Maximum yearly tuition in USD (default from config).",
    ),
    query: Optional[str] = typer.Option(
        None,
        "--query", "-q",
        help="Free text resolved like pressing Enter in the search box.",
    ),
    catalog_file: Optional[Path] = typer.Option(
        None,
        "--catalog",
        help=CATALOG_OPTION_HELP,
    ),
):
    """
    🎯 Filter programs by facets and tuition.

    Facet options must match catalog values exactly. With --query the
    text is resolved first: a university name opens that university,
    anything else becomes facet filters, which explicit options then
    override.

    Examples:
        gradcompass search -d MBA -c Germany
        gradcompass search -c India -t 20000
        gradcompass search -q "MS in Data Science"
    """
    from gradcompass.search import ProgramFilter, QueryResolver, apply_filter

    catalog = _load_catalog(catalog_file)
    program_filter = ProgramFilter.default()

    if query:
        target = QueryResolver(catalog.facet_index).commit(query)
        if target.is_university:
            _show_university(catalog, target.university)
            return
        program_filter = program_filter.merge(target.patch)

    overrides = {
        "degree_type": degree,
        "specialization": specialization,
        "country": country,
        "city": city,
        "university": university,
        "max_tuition": max_tuition,
    }
    program_filter = program_filter.merge({k: v for k, v in overrides.items() if v is not None})

    results = apply_filter(catalog.programs, program_filter)

    active = program_filter.active_facets()
    summary = ", ".join(f"{k}={v}" for k, v in active.items()) or "no facets"
    console.print(f"[dim]Filter: {summary}, max tuition {program_filter.max_tuition:,.0f}[/dim]")

    if not results:
        console.print("[yellow]No programs match these filters.[/yellow]")
        return

    console.print(_programs_table(results, title=f"{len(results)} of {len(catalog)} programs"))


# ─────────────────────────────────────────────────────────────────────────────
# Facets Command
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def facets(
    facet: Optional[str] = typer.Argument(
        None,
        help="degree_type, specialization, country, city or university. Omit for all.",
    ),
    catalog_file: Optional[Path] = typer.Option(
        None,
        "--catalog",
        help=CATALOG_OPTION_HELP,
    ),
):
    """
    🗂️ List the distinct facet values of the catalog.

    Examples:
        gradcompass facets
        gradcompass facets country
    """
    from gradcompass.search import Facet
    from gradcompass.search.facets import FACET_ORDER

    catalog = _load_catalog(catalog_file)

    if facet is None:
        selected = FACET_ORDER
    else:
        try:
            selected = (Facet(facet),)
        except ValueError:
            console.print(f"[red]Unknown facet: {facet}[/red]")
            raise typer.Exit(1)

    for item in selected:
        values = catalog.facet_index.values(item)
        console.print(f"\n[bold]{item.label}[/bold] ({len(values)})")
        for value in values:
            console.print(f"  • {value}")


# ─────────────────────────────────────────────────────────────────────────────
# Program / University Commands
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def program(
    program_id: str = typer.Argument(..., help="Program ID."),
    catalog_file: Optional[Path] = typer.Option(
        None,
        "--catalog",
        help=CATALOG_OPTION_HELP,
    ),
):
    """
    📄 Show a program with costs, scholarships and placements.
    """
    from gradcompass.search import program_path
    from gradcompass.shared.utils import format_usd

    catalog = _load_catalog(catalog_file)
    item = catalog.get(program_id)
    if item is None:
        console.print(f"[red]Program not found: {program_id}[/red]")
        raise typer.Exit(1)

    console.print(Panel(
        f"[bold]{item.program_name}[/bold]\n"
        f"{item.university} · {item.city}, {item.country}\n"
        f"{item.degree_type} · {item.specialization} · {item.duration}\n"
        f"Acceptance rate: {item.acceptance_rate or 'n/a'} · "
        f"Deadline: {item.deadline or 'n/a'}\n\n"
        f"{item.description}\n"
        f"[dim]{program_path(item.id)}[/dim]",
        title="📄 Program",
    ))

    costs = Table(title="Annual Cost (USD)")
    costs.add_column("Item")
    costs.add_column("Amount", justify="right")
    costs.add_row("Tuition", format_usd(item.tuition))
    costs.add_row("Living", format_usd(item.fees.living))
    costs.add_row("Accommodation", format_usd(item.fees.accommodation))
    costs.add_row("Misc", format_usd(item.fees.misc))
    costs.add_row("[bold]Total[/bold]", f"[bold]{format_usd(item.total_annual_cost)}[/bold]")
    console.print(costs)

    if item.scholarships:
        scholarships = Table(title="Scholarships")
        scholarships.add_column("Name")
        scholarships.add_column("Amount")
        scholarships.add_column("Probability")
        for scholarship in item.scholarships:
            scholarships.add_row(scholarship.name, scholarship.amount, scholarship.probability)
        console.print(scholarships)

    placements = item.placements
    if placements.median_salary:
        console.print(
            f"\n[bold]Placements:[/bold] median salary {format_usd(placements.median_salary)}, "
            f"employment {placements.employment_rate or 'n/a'}"
        )
        if placements.top_employers:
            console.print(f"  Top employers: {', '.join(placements.top_employers)}")


@app.command()
def university(
    name: str = typer.Argument(..., help="University name (exact)."),
    catalog_file: Optional[Path] = typer.Option(
        None,
        "--catalog",
        help=CATALOG_OPTION_HELP,
    ),
):
    """
    🏛️ Show a university and all of its programs.
    """
    catalog = _load_catalog(catalog_file)
    _show_university(catalog, name)


# ─────────────────────────────────────────────────────────────────────────────
# Mentors Command
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def mentors(
    category: str = typer.Option(
        "All",
        "--category", "-c",
        help="All, Study Abroad, Essay, Resume or Test Prep.",
    ),
    mentors_file: Optional[Path] = typer.Option(
        None,
        "--mentors",
        help="Mentors JSON file (default from config).",
    ),
):
    """
    🧑‍🏫 List mentors, optionally by category.

    The Resume category also lists Study Abroad mentors.
    """
    from gradcompass.catalog import CatalogError, MentorDirectory

    try:
        directory = MentorDirectory.from_file(mentors_file)
    except CatalogError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if category not in directory.categories:
        console.print(
            f"[red]Unknown category: {category}. "
            f"Choose from: {', '.join(directory.categories)}[/red]"
        )
        raise typer.Exit(1)

    results = directory.filter(category)
    if not results:
        console.print(f"[yellow]No mentors in {category}.[/yellow]")
        return

    table = Table(show_header=True, title=f"Mentors: {category}")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Rate")
    table.add_column("Rating", justify="right")

    for mentor in results:
        rating = mentor.average_rating
        table.add_row(
            mentor.id,
            mentor.name,
            mentor.title,
            mentor.category,
            mentor.rate,
            f"{rating:.1f}" if rating is not None else "-",
        )
    console.print(table)


# ─────────────────────────────────────────────────────────────────────────────
# Advise Command
# ─────────────────────────────────────────────────────────────────────────────


ADVICE_KINDS = ("recommend", "outline", "roi")


@app.command()
def advise(
    kind: str = typer.Argument(..., help="recommend, outline or roi."),
    program_id: Optional[str] = typer.Option(
        None,
        "--program", "-p",
        help="Program ID (required for outline and roi).",
    ),
    profile_file: Optional[Path] = typer.Option(
        None,
        "--profile",
        help="UserProfile JSON file (camelCase keys). Defaults to a blank profile.",
    ),
    catalog_file: Optional[Path] = typer.Option(
        None,
        "--catalog",
        help=CATALOG_OPTION_HELP,
    ),
):
    """
    🤖 Generate AI guidance with Gemini.

    Without GEMINI_API_KEY a static fallback text is shown.

    Examples:
        gradcompass advise recommend --profile me.json
        gradcompass advise outline -p p1 --profile me.json
        gradcompass advise roi -p p1
    """
    from pydantic import ValidationError

    from gradcompass.advisory import get_advisor
    from gradcompass.shared.schemas import INITIAL_PROFILE, UserProfile
    from gradcompass.shared.utils import load_json

    if kind not in ADVICE_KINDS:
        console.print(f"[red]Unknown advice kind: {kind}. Choose from: {', '.join(ADVICE_KINDS)}[/red]")
        raise typer.Exit(1)

    profile = INITIAL_PROFILE
    if profile_file is not None:
        try:
            profile = UserProfile.model_validate(load_json(profile_file))
        except (OSError, ValueError, ValidationError) as e:
            console.print(f"[red]Could not read profile {profile_file}: {e}[/red]")
            raise typer.Exit(1)

    selected = None
    if kind != "recommend":
        if not program_id:
            console.print(f"[red]--program is required for '{kind}'[/red]")
            raise typer.Exit(1)
        selected = _load_catalog(catalog_file).get(program_id)
        if selected is None:
            console.print(f"[red]Program not found: {program_id}[/red]")
            raise typer.Exit(1)

    advisor = get_advisor()
    with console.status("[bold green]Asking Gemini..."):
        if kind == "recommend":
            text, title = advisor.shortlist_recommendation(profile), "💡 Recommendation"
        elif kind == "outline":
            text, title = advisor.essay_outline(selected, profile), "✍️ Essay Outline"
        else:
            text, title = advisor.finance_roi(selected), "💰 ROI Analysis"

    console.print(Panel(text, title=title, border_style="green"))


# ─────────────────────────────────────────────────────────────────────────────
# Journey Commands
# ─────────────────────────────────────────────────────────────────────────────


journey_app = typer.Typer(
    help="🧭 Offline account, shortlist and application set (stored in local files).",
    no_args_is_help=True,
)
app.add_typer(journey_app, name="journey")

EMAIL_OPTION_HELP = "Account email."
ACCOUNTS_OPTION_HELP = "Local accounts JSON file (default from config)."
PROFILES_OPTION_HELP = "Local profiles JSON file (default from config)."


def _local_journey(accounts_file: Optional[Path], profiles_file: Optional[Path]):
    """JourneySession backed by the local account and profile files."""
    from gradcompass.journey import JourneySession, LocalAuthClient, LocalProfileStore

    return JourneySession(LocalProfileStore(profiles_file), auth=LocalAuthClient(accounts_file))


def _login(session, email: str, password: str) -> None:
    from gradcompass.journey import AuthError

    try:
        session.login(email, password)
    except AuthError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@journey_app.command("register")
def journey_register(
    name: str = typer.Option(..., "--name", "-n", help="Full name."),
    email: str = typer.Option(..., "--email", "-e", help=EMAIL_OPTION_HELP),
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, confirmation_prompt=True
    ),
    accounts_file: Optional[Path] = typer.Option(None, "--accounts", help=ACCOUNTS_OPTION_HELP),
    profiles_file: Optional[Path] = typer.Option(None, "--profiles", help=PROFILES_OPTION_HELP),
):
    """
    👤 Create a local account and its profile.

    Examples:
        gradcompass journey register -n "Asha Rao" -e asha@example.com
    """
    from gradcompass.journey import AuthError

    session = _local_journey(accounts_file, profiles_file)
    try:
        profile = session.register(name, email, password)
    except AuthError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Account created for {profile.name} ({profile.email})[/green]")


@journey_app.command("shortlist")
def journey_shortlist(
    email: str = typer.Option(..., "--email", "-e", help=EMAIL_OPTION_HELP),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
    accounts_file: Optional[Path] = typer.Option(None, "--accounts", help=ACCOUNTS_OPTION_HELP),
    profiles_file: Optional[Path] = typer.Option(None, "--profiles", help=PROFILES_OPTION_HELP),
):
    """
    ⭐ Show the saved shortlist.
    """
    session = _local_journey(accounts_file, profiles_file)
    _login(session, email, password)

    programs = session.current_shortlist()
    if not programs:
        console.print("[yellow]Your shortlist is empty.[/yellow]")
        return

    console.print(_programs_table(programs, title=f"Shortlist ({len(programs)})"))


@journey_app.command("add")
def journey_add(
    program_id: str = typer.Argument(..., help="Program ID."),
    email: str = typer.Option(..., "--email", "-e", help=EMAIL_OPTION_HELP),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
    catalog_file: Optional[Path] = typer.Option(None, "--catalog", help=CATALOG_OPTION_HELP),
    accounts_file: Optional[Path] = typer.Option(None, "--accounts", help=ACCOUNTS_OPTION_HELP),
    profiles_file: Optional[Path] = typer.Option(None, "--profiles", help=PROFILES_OPTION_HELP),
):
    """
    ➕ Add a program to the saved shortlist.

    Examples:
        gradcompass journey add p3 -e asha@example.com
    """
    item = _load_catalog(catalog_file).get(program_id)
    if item is None:
        console.print(f"[red]Program not found: {program_id}[/red]")
        raise typer.Exit(1)

    session = _local_journey(accounts_file, profiles_file)
    _login(session, email, password)

    if session.is_shortlisted(program_id):
        console.print(f"[yellow]{item.program_name} is already on your shortlist.[/yellow]")
        return
    if not session.add_to_shortlist(item):
        console.print("[red]Could not save your shortlist.[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]✓ Shortlisted {item.program_name} ({item.university}). "
        f"{session.shortlist_count} saved.[/green]"
    )


@journey_app.command("remove")
def journey_remove(
    program_id: str = typer.Argument(..., help="Program ID."),
    email: str = typer.Option(..., "--email", "-e", help=EMAIL_OPTION_HELP),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
    accounts_file: Optional[Path] = typer.Option(None, "--accounts", help=ACCOUNTS_OPTION_HELP),
    profiles_file: Optional[Path] = typer.Option(None, "--profiles", help=PROFILES_OPTION_HELP),
):
    """
    ➖ Remove a program from the saved shortlist.
    """
    session = _local_journey(accounts_file, profiles_file)
    _login(session, email, password)

    if not session.is_shortlisted(program_id):
        console.print(f"[red]{program_id} is not on your shortlist.[/red]")
        raise typer.Exit(1)
    if not session.remove_from_shortlist(program_id):
        console.print("[red]Could not save your shortlist.[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Removed {program_id}. {session.shortlist_count} saved.[/green]")


@journey_app.command("apply")
def journey_apply(
    program_id: str = typer.Argument(..., help="Shortlisted program ID."),
    tier: Optional[str] = typer.Option(
        None,
        "--tier", "-t",
        help="Dream Shot, Reach, Achievable or Safe (default from config).",
    ),
    email: str = typer.Option(..., "--email", "-e", help=EMAIL_OPTION_HELP),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
    accounts_file: Optional[Path] = typer.Option(None, "--accounts", help=ACCOUNTS_OPTION_HELP),
    profiles_file: Optional[Path] = typer.Option(None, "--profiles", help=PROFILES_OPTION_HELP),
):
    """
    📝 Move a shortlisted program into the application set.

    Shows the application as it starts: status, round, deadline and tier.

    Examples:
        gradcompass journey apply p1 -t "Dream Shot" -e asha@example.com
    """
    from gradcompass.shared.schemas import Tier

    if tier is not None and tier not in {t.value for t in Tier}:
        console.print(
            f"[red]Unknown tier: {tier}. Choose from: {', '.join(t.value for t in Tier)}[/red]"
        )
        raise typer.Exit(1)

    session = _local_journey(accounts_file, profiles_file)
    _login(session, email, password)

    program = next((p for p in session.current_shortlist() if p.id == program_id), None)
    if program is None:
        console.print(f"[red]{program_id} is not on your shortlist. Add it first.[/red]")
        raise typer.Exit(1)

    application = session.move_to_app_set(program, tier)
    console.print(Panel(
        f"[bold]{application.program_name}[/bold] at {application.university}\n"
        f"Status: {application.status}\n"
        f"Round: {application.round}\n"
        f"Deadline: {application.app_deadline}\n"
        f"Tier: {application.tier}",
        title="📝 Application",
        border_style="green",
    ))


# ─────────────────────────────────────────────────────────────────────────────
# Info Command
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def info():
    """
    ℹ️ Show system information and configuration.

    Displays:
      • Version information
      • Search and shortlist settings
      • Data paths and their existence status
      • Which external services are configured

    Useful for debugging and verifying setup.
    """
    from gradcompass import __version__
    from gradcompass.shared.config import get_settings

    settings = get_settings()

    console.print(Panel(
        f"[bold]GradCompass[/bold]\n"
        f"Version: {__version__}\n"
        f"Config: config/settings.yaml",
        title="ℹ️ Info",
    ))

    console.print("\n[bold]Settings:[/bold]")
    table = Table()
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("Min query length", str(settings.search.min_query_length))
    table.add_row("Max suggestions", str(settings.get_effective_max_suggestions()))
    table.add_row("Default max tuition", f"{settings.search.default_max_tuition:,}")
    table.add_row("Guest shortlist limit", str(settings.shortlist.guest_limit))
    table.add_row("Gemini model", settings.get_effective_model())
    console.print(table)

    console.print("\n[bold]Services:[/bold]")
    gemini = "✓" if settings.gemini_api_key else "✗ (fallback texts)"
    supabase = "✓" if settings.get_effective_supabase_url() and settings.supabase_anon_key else "✗"
    console.print(f"  Gemini API key: {gemini}")
    console.print(f"  Supabase: {supabase}")

    console.print("\n[bold]Data Paths:[/bold]")
    resolved_paths = settings.resolved_paths
    path_dict = {
        "data_dir": resolved_paths.data_dir,
        "catalog_file": resolved_paths.catalog_file,
        "mentors_file": resolved_paths.mentors_file,
        "profiles_file": resolved_paths.profiles_file,
        "accounts_file": resolved_paths.accounts_file,
    }
    for name, path in path_dict.items():
        exists = "✓" if path.exists() else "✗"
        console.print(f"  {name}: {path} [{exists}]")


# ─────────────────────────────────────────────────────────────────────────────
# Entry Point
# ─────────────────────────────────────────────────────────────────────────────


def cli():
    """CLI entry point."""
    app()


if __name__ == "__main__":
    cli()
