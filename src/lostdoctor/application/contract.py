CONTRACT_VERSION = "1.0.0"

COMMAND_INTENTS = (
    "handle_input",
    "show_help",
)

QUERY_INTENTS = (
    "get_game_view",
    "render_frame",
)

CONTRACT_DTO_TYPES = (
    "ActionResult",
    "GameView",
    "InventoryItemView",
)
