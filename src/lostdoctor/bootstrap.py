from lostdoctor.application.services.event_bus import EventBus
from lostdoctor.application.services.game_service import GameService
from lostdoctor.application.services.interaction_service import InteractionDispatcher
from lostdoctor.application.services.script_runner import ScriptRunner
from lostdoctor.application.services.story_journal import StoryJournal
from lostdoctor.config import GameSettings, load_settings
from lostdoctor.domain.models.actor import Actor
from lostdoctor.domain.models.inventory import Inventory
from lostdoctor.domain.models.narrative import NarrativeState
from lostdoctor.domain.models.session import GameSession
from lostdoctor.domain.models.world_grid import Viewport, WorldGrid
from lostdoctor.domain.ports import ChoiceMenu, Clock, MessageDisplay, Renderer
from lostdoctor.infrastructure.inmemory.item_catalog import STARTING_ITEMS, item_name
from lostdoctor.infrastructure.inmemory.world_map import initial_rows


START_ORIGIN = (4, 0)
START_ACTOR = (7, 2)


def new_session() -> GameSession:
    grid = WorldGrid(initial_rows())
    viewport = Viewport(
        origin_x=START_ORIGIN[0],
        origin_y=START_ORIGIN[1],
        world_width=grid.width,
        world_height=grid.height,
    )
    actor = Actor(*START_ACTOR)
    inventory = Inventory(item_name, initial=STARTING_ITEMS)
    return GameSession(grid=grid, viewport=viewport, actor=actor, inventory=inventory, narrative=NarrativeState())


def create_game_service(
    renderer: Renderer,
    messages: MessageDisplay,
    clock: Clock,
    menu: ChoiceMenu,
    *,
    settings: GameSettings | None = None,
    event_bus: EventBus | None = None,
    session: GameSession | None = None,
) -> GameService:
    settings = settings or load_settings()
    event_bus = event_bus or EventBus()
    runner = ScriptRunner(
        renderer,
        messages,
        clock,
        event_bus,
        animation_delay_ms=settings.animation_delay_ms,
    )
    dispatcher = InteractionDispatcher(runner, menu)
    journal = StoryJournal(event_bus)
    journal.register_handlers()
    return GameService(
        session or new_session(),
        runner,
        dispatcher,
        menu,
        event_bus=event_bus,
        transition_pause_ms=settings.transition_pause_ms,
        journal=journal,
    )
