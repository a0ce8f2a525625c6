from langgraph.graph import StateGraph, END
from langchain_core.runnables import RunnableConfig

from adventure_types import DIFFICULTIES, AdventureEvent, AdventureState
from answer_checker_node import check_level_one_answer, check_level_two_answer
from level_two_node import start_level_two
from read_aloud_node import read_aloud
from start_adventure_node import start_adventure

# Graph
workflow = StateGraph(AdventureState)

# Add nodes
workflow.add_node("start_adventure_node", start_adventure)
workflow.add_node("check_level_one_node", check_level_one_answer)
workflow.add_node("start_level_two_node", start_level_two)
workflow.add_node("check_level_two_node", check_level_two_answer)
workflow.add_node("read_aloud_node", read_aloud)


# Conditional entry: one user event, at most one node
def route_event(state: AdventureState):
    event = state.get("event") or {}
    event_type = event.get("type")
    game_state = state["game_state"]
    text = (event.get("text") or "").strip()

    if game_state == "INITIAL" and event_type == "submit_question" and text:
        return "start_adventure_node"
    if game_state == "LEVEL_1" and event_type == "submit_answer" and text:
        return "check_level_one_node"
    if game_state == "LEVEL_1_FEEDBACK" and event_type == "choose_difficulty" and event.get("difficulty") in DIFFICULTIES:
        return "start_level_two_node"
    if game_state == "LEVEL_2" and event_type == "submit_answer" and text:
        return "check_level_two_node"
    if game_state in ("LEVEL_1", "LEVEL_2") and event_type == "read_aloud" and not state["context"]["is_audio_playing"]:
        return "read_aloud_node"

    print(f"Router: ignoring event '{event_type}' in state {game_state}.")
    return "END"


workflow.set_conditional_entry_point(
    route_event,
    {
        "start_adventure_node": "start_adventure_node",
        "check_level_one_node": "check_level_one_node",
        "start_level_two_node": "start_level_two_node",
        "check_level_two_node": "check_level_two_node",
        "read_aloud_node": "read_aloud_node",
        "END": END,
    }
)

for node_name in (
    "start_adventure_node",
    "check_level_one_node",
    "start_level_two_node",
    "check_level_two_node",
    "read_aloud_node",
):
    workflow.add_edge(node_name, END)

# Compile the graph
app = workflow.compile()


def advance(state: AdventureState, event: AdventureEvent, generator) -> AdventureState:
    """Applies one user event and returns the next state.

    The incoming state is left untouched. Messages and effects from the
    previous event are cleared, so each appears exactly once.
    """
    prepared: AdventureState = {
        **state,
        "event": event,
        "error_message": None,
        "system_message": None,
        "effects": [],
    }
    config = RunnableConfig(configurable={"generator": generator})
    result = app.invoke(prepared, config=config)
    return {**prepared, **result}
