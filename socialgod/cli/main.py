"""Main CLI entry point for the Social GOD script console.

Usage:
    python -m socialgod.cli check                              # Probe the API key
    python -m socialgod.cli trends                             # Suggest trending topics
    python -m socialgod.cli generate "<topic>"                 # Generate a script
    python -m socialgod.cli generate "<topic>" -d short -c end --image
    python -m socialgod.cli history                            # List saved scripts
    python -m socialgod.cli show <id> --markdown               # Show one script
    python -m socialgod.cli image <id>                         # Generate hook image
    python -m socialgod.cli analyze video.mp4                  # Critique a media file
    python -m socialgod.cli persona show|set <file>|reset      # Manage the persona
    python -m socialgod.cli export csv -o scripts.csv          # Export history

Add --mock to any command to run without calling the real API.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import load_config
from ..console import ContentConsole
from ..exceptions import ConnectionFailed, CredentialMissing, GenerationFailed
from ..export import script_to_markdown, script_to_sheet_row, scripts_to_csv, scripts_to_json
from ..models import CtaPlacement, ScriptContent, VideoDuration

console = Console()


def _build_console(args: argparse.Namespace) -> ContentConsole:
    """Create a ContentConsole from global CLI options."""
    config = load_config(args.config)
    if args.mock:
        config.gemini.provider = "mock"
    if args.data_dir:
        config.paths.data_dir = args.data_dir
    return ContentConsole(config)


def _load_local(app: ContentConsole) -> None:
    """Hydrate persisted state without touching the network."""
    app.repository.load_all()
    app.personas.load()


def _print_unavailable() -> None:
    print("Error: Gemini is not reachable with the configured API key.", file=sys.stderr)
    print("Set GEMINI_API_KEY (or API_KEY) in .env and run 'check' again.", file=sys.stderr)


def _print_script(script: ScriptContent) -> None:
    # Every field is model output; escape it before mixing with markup
    console.print(f"\n[bold green]{escape(script.title.upper())}[/bold green]")
    console.print(
        f"[dim]{script.id} | {script.duration.label} | CTA: {script.cta_placement.label} | "
        f"{script.timestamp:%d/%m/%Y %H:%M}[/dim]\n"
    )
    console.print(f"[bold]Texto na tela:[/bold] {escape(script.video_start_text)}")
    console.print(f"[bold]Hook visual:[/bold] {escape(script.hook_visual_desc)}")
    console.print(f"[bold]Gancho alternativo:[/bold] {escape(script.alternative_hook)}\n")

    for scene in script.script_scenes:
        console.print(
            f"  [cyan]{escape(scene.time_segment):>7}[/cyan]  [blue]\\[TELA][/blue] "
            f"{escape(scene.visual_cue)}"
        )
        console.print(f"           \"{escape(scene.audio_narration)}\"")
    if not script.script_scenes and script.main_content:
        console.print(script.main_content, markup=False)

    console.print(f"\n[bold]CTA:[/bold] {escape(script.cta_text)}")
    console.print(f"[bold]Outro:[/bold] {escape(script.outro)}")
    console.print(f"[bold]Legenda:[/bold] {escape(script.caption_seo)}")
    console.print(f"[bold]Hashtags:[/bold] {escape(' '.join(script.hashtags))}")
    if script.generated_image_url:
        console.print("[bold]Imagem do gancho:[/bold] gerada")


def cmd_check(args: argparse.Namespace) -> int:
    """Probe the backend with the configured key."""
    app = _build_console(args)
    if asyncio.run(app.connect()):
        print("Gemini connection OK")
        return 0
    _print_unavailable()
    return 1


def cmd_trends(args: argparse.Namespace) -> int:
    """Print trending topic suggestions."""
    app = _build_console(args)
    trends = asyncio.run(app.refresh_trends())

    print(f"{len(trends)} suggestion(s):\n")
    for idx, trend in enumerate(trends, 1):
        print(f"  {idx}. {trend.title}")
        print(f"     {trend.reason}")
    return 0


async def _generate(app: ContentConsole, args: argparse.Namespace) -> int:
    if not await app.startup():
        _print_unavailable()
        return 1

    try:
        script = await app.generate(
            args.topic,
            VideoDuration(args.duration),
            CtaPlacement(args.cta),
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (CredentialMissing, ConnectionFailed) as e:
        print(f"Script generation failed (connection): {e}", file=sys.stderr)
        return 1
    except GenerationFailed as e:
        print(f"Script generation failed (bad response): {e.message}", file=sys.stderr)
        return 1

    _print_script(script)

    if args.image:
        try:
            script = await app.attach_image(script.id)
        except (ConnectionFailed, GenerationFailed) as e:
            print(f"Image generation failed: {e}", file=sys.stderr)
            return 1
        if script.generated_image_url:
            print("\nHook image attached.")

    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate a script and save it to history."""
    return asyncio.run(_generate(_build_console(args), args))


def cmd_history(args: argparse.Namespace) -> int:
    """List saved scripts, most recent first."""
    app = _build_console(args)
    _load_local(app)

    scripts = app.repository.scripts
    if not scripts:
        print("No scripts saved yet.")
        return 0

    table = Table(title=f"{len(scripts)} script(s)")
    table.add_column("ID", style="dim")
    table.add_column("Date")
    table.add_column("Title", style="bold")
    table.add_column("Duration")
    table.add_column("CTA")
    table.add_column("Image")

    for script in scripts[: args.limit] if args.limit is not None else scripts:
        table.add_row(
            script.id[:8],
            f"{script.timestamp:%d/%m/%Y}",
            escape(script.title),
            script.duration.label,
            script.cta_placement.label,
            "yes" if script.generated_image_url else "",
        )

    console.print(table)
    return 0


def _find_script(app: ContentConsole, script_id: str) -> ScriptContent | None:
    """Find a script by full id or unique prefix."""
    script = app.repository.get(script_id)
    if script is not None:
        return script
    matches = [s for s in app.repository.scripts if s.id.startswith(script_id)]
    if len(matches) == 1:
        return matches[0]
    return None


def cmd_show(args: argparse.Namespace) -> int:
    """Show one saved script."""
    app = _build_console(args)
    _load_local(app)

    script = _find_script(app, args.id)
    if script is None:
        print(f"Error: Script not found: {args.id}", file=sys.stderr)
        return 1

    if args.markdown:
        print(script_to_markdown(script))
    elif args.row:
        print(script_to_sheet_row(script))
    else:
        _print_script(script)
    return 0


async def _image(app: ContentConsole, args: argparse.Namespace) -> int:
    _load_local(app)
    script = _find_script(app, args.id)
    if script is None:
        print(f"Error: Script not found: {args.id}", file=sys.stderr)
        return 1

    try:
        updated = await app.attach_image(script.id)
    except (ConnectionFailed, GenerationFailed) as e:
        print(f"Image generation failed: {e}", file=sys.stderr)
        return 1

    if not updated.generated_image_url:
        _print_unavailable()
        return 1

    print(f"Hook image attached to {updated.id}")
    return 0


def cmd_image(args: argparse.Namespace) -> int:
    """Generate a hook image for a saved script."""
    return asyncio.run(_image(_build_console(args), args))


def cmd_analyze(args: argparse.Namespace) -> int:
    """Critique an image or video file."""
    path = Path(args.file)
    if not path.exists():
        print(f"Error: File not found: {path}", file=sys.stderr)
        return 1

    app = _build_console(args)
    _load_local(app)

    try:
        critique = asyncio.run(app.analyze(path))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (CredentialMissing, ConnectionFailed) as e:
        print(f"Media analysis failed (connection): {e}", file=sys.stderr)
        return 1
    except GenerationFailed as e:
        print(f"Media analysis failed (bad response): {e.message}", file=sys.stderr)
        return 1

    console.print(critique, markup=False)
    return 0


def cmd_persona(args: argparse.Namespace) -> int:
    """Show, replace or reset the persona."""
    app = _build_console(args)
    _load_local(app)

    if args.persona_command == "show":
        print(app.personas.dump())
        return 0

    if args.persona_command == "set":
        path = Path(args.file)
        if not path.exists():
            print(f"Error: File not found: {path}", file=sys.stderr)
            return 1
        try:
            persona = app.personas.set_from_text(path.read_text(encoding="utf-8"))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"Persona updated: {persona.project}")
        return 0

    if args.persona_command == "reset":
        if not args.yes:
            answer = input("Reset the persona to the built-in default? [y/N] ")
            if answer.strip().lower() not in ("y", "yes", "s", "sim"):
                print("Cancelled.")
                return 0
        persona = app.personas.reset()
        print(f"Persona reset to default: {persona.project}")
        return 0

    print("Error: Unknown persona command", file=sys.stderr)
    return 1


def cmd_export(args: argparse.Namespace) -> int:
    """Export the script history."""
    app = _build_console(args)
    _load_local(app)
    scripts = app.repository.scripts

    if args.format == "csv":
        content = scripts_to_csv(scripts)
    elif args.format == "json":
        content = scripts_to_json(scripts)
    elif args.format == "tsv":
        content = "\n".join(script_to_sheet_row(s) for s in scripts) + "\n"
    else:
        content = "\n\n---\n\n".join(script_to_markdown(s) for s in scripts) + "\n"

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        print(f"Exported {len(scripts)} script(s) to {output_path}")
    else:
        sys.stdout.write(content)
    return 0


def main() -> int:
    """Main CLI entry point."""
    load_dotenv(Path.cwd() / ".env")

    parser = argparse.ArgumentParser(
        description="Social GOD script console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory for persisted history and persona (default: data)",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use the mock provider instead of the real API",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Check the API key")
    check_parser.set_defaults(func=cmd_check)

    trends_parser = subparsers.add_parser("trends", help="Suggest trending topics")
    trends_parser.set_defaults(func=cmd_trends)

    generate_parser = subparsers.add_parser("generate", help="Generate a script")
    generate_parser.add_argument("topic", help="Video topic")
    generate_parser.add_argument(
        "-d", "--duration",
        choices=[d.value for d in VideoDuration],
        default=VideoDuration.MEDIUM.value,
        help="Video length: short (10s), medium (30s), long (60s)",
    )
    generate_parser.add_argument(
        "-c", "--cta",
        choices=[c.value for c in CtaPlacement],
        default=CtaPlacement.MIDDLE.value,
        help="Where to place the call-to-action",
    )
    generate_parser.add_argument(
        "--image",
        action="store_true",
        help="Also generate the hook image",
    )
    generate_parser.set_defaults(func=cmd_generate)

    history_parser = subparsers.add_parser("history", help="List saved scripts")
    history_parser.add_argument("-n", "--limit", type=int, default=None, help="Show only N scripts")
    history_parser.set_defaults(func=cmd_history)

    show_parser = subparsers.add_parser("show", help="Show a saved script")
    show_parser.add_argument("id", help="Script id or unique prefix")
    show_parser.add_argument("--markdown", action="store_true", help="Print as markdown")
    show_parser.add_argument("--row", action="store_true", help="Print as a spreadsheet row")
    show_parser.set_defaults(func=cmd_show)

    image_parser = subparsers.add_parser("image", help="Generate the hook image for a script")
    image_parser.add_argument("id", help="Script id or unique prefix")
    image_parser.set_defaults(func=cmd_image)

    analyze_parser = subparsers.add_parser("analyze", help="Critique an image or video")
    analyze_parser.add_argument("file", help="Media file to analyze")
    analyze_parser.set_defaults(func=cmd_analyze)

    persona_parser = subparsers.add_parser("persona", help="Manage the persona")
    persona_subparsers = persona_parser.add_subparsers(
        dest="persona_command", help="Persona commands"
    )
    persona_subparsers.add_parser("show", help="Print the current persona")
    persona_set_parser = persona_subparsers.add_parser("set", help="Replace from a JSON file")
    persona_set_parser.add_argument("file", help="JSON file with the new persona")
    persona_reset_parser = persona_subparsers.add_parser("reset", help="Restore the default")
    persona_reset_parser.add_argument("-y", "--yes", action="store_true", help="Skip confirmation")
    persona_parser.set_defaults(func=cmd_persona, persona_command="show")

    export_parser = subparsers.add_parser("export", help="Export script history")
    export_parser.add_argument("format", choices=["csv", "json", "tsv", "md"], help="Export format")
    export_parser.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    export_parser.set_defaults(func=cmd_export)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
