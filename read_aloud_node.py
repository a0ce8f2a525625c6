from adventure_types import AdventureState

LEVEL_STORY_KEYS = {
    "LEVEL_1": "l1_story",
    "LEVEL_2": "l2_story",
}


def read_aloud(state: AdventureState) -> AdventureState:
    print(f"--- Entering Node: read_aloud --- State: {state['game_state']}")
    story = state["context"][LEVEL_STORY_KEYS[state["game_state"]]]
    return {
        **state,
        "effects": state["effects"] + [{"kind": "narrate", "text": story}],
    }
