from langchain_core.runnables import RunnableConfig

from adventure_types import AdventureState
from prompts import get_ability_report_prompt
from schemas import AbilityModel
from utils import answers_match

FIRST_WRONG_HINT = "So close! Brave explorer, give it another try!"
REPEAT_WRONG_HINT = "Hmm, that's still not it. Look carefully at the clues in the question."
LEVEL_TWO_HINT = "Here's a little clue: read the question very carefully!"


def check_level_one_answer(state: AdventureState) -> AdventureState:
    print(f"--- Entering Node: check_level_one_answer --- State: {state['game_state']}")
    context = state["context"]
    effects = state["effects"] + [{"kind": "stop_audio"}]
    user_answer = state["event"]["text"]

    if answers_match(user_answer, context["l1_answer"]):
        print(f"Answer Checker: '{user_answer}' is correct for level one.")
        return {
            **state,
            "game_state": "LEVEL_1_FEEDBACK",
            "system_message": None,
            "effects": effects,
        }

    fail_count = context["l1_fail_count"]
    print(f"Answer Checker: '{user_answer}' is wrong for level one (failed {fail_count + 1} time(s)).")
    return {
        **state,
        "context": {**context, "l1_fail_count": fail_count + 1},
        "system_message": FIRST_WRONG_HINT if fail_count == 0 else REPEAT_WRONG_HINT,
        "effects": effects,
    }


def check_level_two_answer(state: AdventureState, config: RunnableConfig) -> AdventureState:
    print(f"--- Entering Node: check_level_two_answer --- State: {state['game_state']}")
    context = state["context"]
    effects = state["effects"] + [{"kind": "stop_audio"}]
    user_answer = state["event"]["text"]

    if not answers_match(user_answer, context["l2_answer"]):
        print(f"Answer Checker: '{user_answer}' is wrong for level two.")
        return {
            **state,
            "system_message": LEVEL_TWO_HINT,
            "effects": effects,
        }

    print(f"Answer Checker: '{user_answer}' is correct for level two. Writing the ability report.")
    generator = config["configurable"]["generator"]
    prompt = get_ability_report_prompt(
        context["initial_question"],
        context["l1_fail_count"] + 1,
        context["difficulty"],
    )

    ability = None
    try:
        ability = generator.generate_structured_content(prompt, AbilityModel)
    except Exception as e:
        # The reward screen still shows, just without the scorecard
        print(f"Error generating ability report: {e}")

    return {
        **state,
        "game_state": "FINAL_REWARD",
        "ability": state["ability"] or ability,
        "system_message": None,
        "effects": effects,
    }
