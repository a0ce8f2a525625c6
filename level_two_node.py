from langchain_core.runnables import RunnableConfig

from adventure_types import DIFFICULTY_LABELS, AdventureState
from prompts import get_level_two_prompt
from schemas import LevelContent

LEVEL_TWO_FAILED_MESSAGE = "The next level could not be built. Please pick a difficulty again!"


def start_level_two(state: AdventureState, config: RunnableConfig) -> AdventureState:
    print(f"--- Entering Node: start_level_two --- State: {state['game_state']}")
    generator = config["configurable"]["generator"]
    context = state["context"]
    difficulty = state["event"]["difficulty"]

    prompt = get_level_two_prompt(
        context["l1_story"],
        context["l1_question"],
        f"{difficulty} ({DIFFICULTY_LABELS[difficulty]})",
    )

    try:
        level_content = generator.generate_structured_content(prompt, LevelContent)
        image = generator.generate_illustration(level_content.story)
    except Exception as e:
        print(f"Error generating level two at difficulty {difficulty}: {e}")
        return {
            **state,
            "error_message": LEVEL_TWO_FAILED_MESSAGE,
        }

    return {
        **state,
        "game_state": "LEVEL_2",
        "context": {
            **context,
            "difficulty": difficulty,
            "l2_story": level_content.story,
            "l2_question": level_content.question,
            "l2_answer": level_content.answer,
            "l2_image": image,
        },
        "error_message": None,
        "effects": state["effects"] + [{"kind": "narrate", "text": level_content.story}],
    }
