import views
from generation import ContentGenerationError, ContentGenerator
from prompts import predefined_questions
from session import AdventureSession
from utils import resolve_question_choice
from views import QUIT_COMMAND, READ_COMMAND, RESTART_COMMAND, console

LOADING_MESSAGES = {
    "INITIAL": "Weaving the threads of your adventure story...",
    "LEVEL_1_FEEDBACK": "Building a new land of trials...",
    "LEVEL_2": "Casting some magic...",
}


def _dispatch_with_spinner(session: AdventureSession, action, *args) -> None:
    # Input stays blocked until the round-trip is over
    message = LOADING_MESSAGES.get(session.game_state, "Casting some magic...")
    with console.status(f"[yellow]{message}[/yellow]"):
        action(*args)


def play_turn(session: AdventureSession) -> bool:
    """Render the current screen, read one input and apply it. Returns False to quit."""
    game_state = session.game_state
    views.render(session.state, session.pop_notices())

    if game_state == "INITIAL":
        views.render_initial(predefined_questions)
        user_input = views.ask("Enter a math key (or a number from the list)")
    elif game_state == "LEVEL_1_FEEDBACK":
        user_input = views.ask("Choose your difficulty (1-3)")
    elif game_state == "FINAL_REWARD":
        user_input = views.ask(f"Press Enter to start a new adventure, or type {QUIT_COMMAND}")
        if user_input.strip() == QUIT_COMMAND:
            return False
        session.restart()
        return True
    else:
        user_input = views.ask("Your answer")

    command = user_input.strip()
    if command == QUIT_COMMAND:
        return False
    if command == RESTART_COMMAND:
        session.restart()
        return True

    if game_state == "INITIAL":
        question = resolve_question_choice(user_input, predefined_questions)
        if question and not question.startswith("/"):
            _dispatch_with_spinner(session, session.submit_question, question)
    elif game_state == "LEVEL_1_FEEDBACK":
        difficulty = views.resolve_difficulty_choice(user_input)
        if difficulty:
            _dispatch_with_spinner(session, session.choose_difficulty, difficulty)
        else:
            console.print("[red]Please pick 1, 2 or 3.[/red]")
    elif command == READ_COMMAND:
        session.read_aloud()
    elif command:
        _dispatch_with_spinner(session, session.submit_answer, command)
    return True


def run_game(generator: ContentGenerator) -> None:
    print("Starting the Math Adventure...")
    session = AdventureSession(generator)
    try:
        while play_turn(session):
            pass
    except (KeyboardInterrupt, EOFError):
        console.print()
    finally:
        session.close()
    console.print("[bold magenta]See you on the next adventure![/bold magenta]")


def main() -> None:
    try:
        generator = ContentGenerator.from_config()
    except ContentGenerationError as e:
        console.print(f"[bold red]{e}[/bold red]")
        return
    run_game(generator)


if __name__ == "__main__":
    main()
