from typing import Optional


def answers_match(given: str, expected: str) -> bool:
    # Whitespace and case never count against the player
    return given.strip().lower() == expected.strip().lower()


def resolve_question_choice(user_input: str, predefined_questions: list[str]) -> Optional[str]:
    """
    Turns the landing-screen input into the math question to play.

    Args:
        user_input: What the player typed.
        predefined_questions: The example questions offered on screen.

    Returns:
        The example question when the input is its number (1-based), the
        trimmed input otherwise, or None for blank input.
    """
    choice = user_input.strip()
    if not choice:
        return None
    if choice.isdigit():
        choice_num = int(choice)
        if 1 <= choice_num <= len(predefined_questions):
            return predefined_questions[choice_num - 1]
    return choice
