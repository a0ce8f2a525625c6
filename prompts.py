from typing import List

from config import STORY_LANGUAGE

predefined_questions: List[str] = ["15 x 8", "120 ÷ 4", "56 + 78", "99 - 45"]

ILLUSTRATION_STYLE = (
    "Cartoon style, bright colors, cute, Pixar-like, high saturation, simple lines, imaginative."
)


def get_level_one_prompt(initial_question: str) -> str:
    return (
        f"You are a storyteller for young children. Weave this elementary school math problem into the first level "
        f"of an imaginative cartoon adventure: {initial_question}."
        f"\nSTORY: tell the scene in 3-5 short, simple sentences (about 60-100 words) in {STORY_LANGUAGE}, easy for a young child to read."
        f"\nQUESTION: restate the math problem as a challenge inside the story."
        f"\nANSWER: give only the correct answer, as short as possible (for example '120')."
    )


def get_level_two_prompt(level_one_story: str, level_one_question: str, difficulty: str) -> str:
    return (
        f"You are a storyteller for young children. The first level of the adventure was: '{level_one_story}'. "
        f"Its math challenge was: '{level_one_question}'."
        f"\nDesign level two at difficulty {difficulty}. The story must be more thrilling, and the math question must "
        f"explore the same topic from a deeper level or a new angle."
        f"\nSTORY: tell the scene in 3-5 short, simple sentences (about 60-100 words) in {STORY_LANGUAGE}, easy for a young child to read."
        f"\nQUESTION: the advanced math question for this level."
        f"\nANSWER: give only the correct answer, as short as possible."
    )


def get_ability_report_prompt(initial_question: str, level_one_attempts: int, difficulty: str) -> str:
    return (
        f"Evaluate a young explorer's performance in a math adventure. "
        f"The starting problem was '{initial_question}'. "
        f"Level one was solved after {level_one_attempts} attempt(s). "
        f"Level two was played at difficulty {difficulty} and solved on the first attempt."
        f"\nMASTERY: knowledge mastery score from 0 to 100."
        f"\nLOGIC: logical reasoning score from 0 to 100."
        f"\nADVICE: short, warm teaching advice for a parent or teacher, in {STORY_LANGUAGE}."
    )


def get_illustration_prompt(story: str) -> str:
    return f"{story}. {ILLUSTRATION_STYLE}"


def get_narration_prompt(text: str) -> str:
    return f"Read the following story aloud in a warm, lively explorer's voice: {text}"
