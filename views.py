from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from adventure_types import DIFFICULTIES, DIFFICULTY_LABELS, AdventureState, Difficulty
from schemas import AbilityModel

console = Console()

READ_COMMAND = "/read"
RESTART_COMMAND = "/restart"
QUIT_COMMAND = "/quit"

TITLES = {
    "INITIAL": "Knowledge Explorer",
}
DEFAULT_TITLE = "Math Adventure"


def describe_image(image: str) -> str:
    if image.startswith("data:"):
        mime_type = image[5:].split(";", 1)[0]
        size_kb = len(image.split(",", 1)[-1]) * 3 // 4 // 1024
        return f"[illustration: {mime_type}, {size_kb} KB]"
    return f"[illustration: {image}]"


def render_header(state: AdventureState) -> None:
    title = TITLES.get(state["game_state"], DEFAULT_TITLE)
    console.rule(f"[bold magenta]{title}[/bold magenta]")


def render_messages(state: AdventureState, notices: List[str]) -> None:
    if state.get("error_message"):
        console.print(f"[bold red]❌ {escape(state['error_message'])}[/bold red]")
    if state.get("system_message"):
        console.print(f"[yellow]💡 {escape(state['system_message'])}[/yellow]")
    for notice in notices:
        console.print(f"[dim]📢 {escape(notice)}[/dim]")


def render_initial(predefined_questions: List[str]) -> None:
    console.print(Panel(
        "\"Hey! I'm your adventure guide. Tell me a math problem and I'll turn it into a thrilling adventure! "
        "Are you ready for the challenge?\"",
        title="🗺️ Your Guide",
        border_style="yellow",
    ))
    console.print("[dim]Not sure what to play? Try one of these sparks of inspiration:[/dim]")
    for i, question in enumerate(predefined_questions):
        console.print(f"  [bold]{i+1}.[/bold] 💡 {escape(question)}")


def render_stage(image: str, story: str, question: str, is_audio_playing: bool) -> None:
    console.print(f"[dim]{escape(describe_image(image))}[/dim]")
    console.print(Panel(f"✨ \"{escape(story)}\"", border_style="cyan"))
    console.print(Panel(f"[bold blue]{escape(question)}[/bold blue]", title="Challenge", border_style="blue"))
    if is_audio_playing:
        console.print("[magenta]🔊 The narrator is reading the story...[/magenta]")
    console.print(
        f"[dim]Type your answer, {READ_COMMAND} to hear the story, "
        f"{RESTART_COMMAND} to start over or {QUIT_COMMAND} to leave.[/dim]"
    )


def render_level_one_feedback() -> None:
    console.print(Panel(
        "🥇 [bold green]Challenge complete![/bold green]\n"
        "A true explorer! The road ahead is even more dangerous. Are you ready?",
        border_style="green",
    ))
    for i, difficulty in enumerate(DIFFICULTIES):
        console.print(f"  [bold]{i+1}.[/bold] {DIFFICULTY_LABELS[difficulty]}")


def render_ability(ability: AbilityModel) -> None:
    table = Table(show_header=False, box=None)
    table.add_row("🧠 Knowledge mastery", f"[green]{ability.mastery:.0f}%[/green]")
    table.add_row("⚡ Logical reasoning", f"[blue]{ability.logic:.0f}%[/blue]")
    console.print(table)
    console.print(Panel(escape(ability.advice), title="📜 Explorer's report", border_style="orange3"))


def render_final_reward(state: AdventureState) -> None:
    context = state["context"]
    console.print(f"[dim]{escape(describe_image(context['l1_image']))}  {escape(describe_image(context['l2_image']))}[/dim]")
    console.print(Panel("🏆 [bold orange3]Legendary Explorer![/bold orange3] 🏆", border_style="orange3"))
    if state.get("ability"):
        render_ability(state["ability"])


def render(state: AdventureState, notices: List[str]) -> None:
    render_header(state)
    render_messages(state, notices)
    game_state = state["game_state"]
    context = state["context"]
    if game_state == "LEVEL_1":
        render_stage(context["l1_image"], context["l1_story"], context["l1_question"], context["is_audio_playing"])
    elif game_state == "LEVEL_1_FEEDBACK":
        render_level_one_feedback()
    elif game_state == "LEVEL_2":
        render_stage(context["l2_image"], context["l2_story"], context["l2_question"], context["is_audio_playing"])
    elif game_state == "FINAL_REWARD":
        render_final_reward(state)


def ask(label: str) -> str:
    return Prompt.ask(f"[bold]{label}[/bold]", console=console, default="", show_default=False)


def resolve_difficulty_choice(user_input: str) -> Optional[Difficulty]:
    choice = user_input.strip().upper()
    if choice.isdigit() and 1 <= int(choice) <= len(DIFFICULTIES):
        return DIFFICULTIES[int(choice) - 1]
    if choice in DIFFICULTIES:
        return choice
    return None
