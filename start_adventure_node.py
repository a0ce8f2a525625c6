from langchain_core.runnables import RunnableConfig

from adventure_types import AdventureState
from prompts import get_level_one_prompt
from schemas import LevelContent

START_FAILED_MESSAGE = "Oh no! The magic fizzled out. Maybe the question was too tricky, try again!"


def start_adventure(state: AdventureState, config: RunnableConfig) -> AdventureState:
    print(f"--- Entering Node: start_adventure --- State: {state['game_state']}")
    generator = config["configurable"]["generator"]
    initial_question = state["event"]["text"].strip()

    try:
        level_content = generator.generate_structured_content(
            get_level_one_prompt(initial_question), LevelContent
        )
        image = generator.generate_illustration(level_content.story)
    except Exception as e:
        print(f"Error generating level one for '{initial_question}': {e}")
        return {
            **state,
            "error_message": START_FAILED_MESSAGE,
        }

    return {
        **state,
        "game_state": "LEVEL_1",
        "context": {
            **state["context"],
            "initial_question": initial_question,
            "l1_story": level_content.story,
            "l1_question": level_content.question,
            "l1_answer": level_content.answer,
            "l1_image": image,
        },
        "error_message": None,
        "effects": state["effects"] + [{"kind": "narrate", "text": level_content.story}],
    }
