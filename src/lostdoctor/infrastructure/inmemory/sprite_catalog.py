"""Terminal glyphs for every cell id.

Each sprite is two characters wide so the 10 x 4 viewport keeps square-ish
tiles in a monospaced console. Styles are rich style strings.
"""

from dataclasses import dataclass

from lostdoctor.domain.models.cell import Cell


@dataclass(frozen=True)
class SpriteGlyph:
    text: str
    style: str = "white"


_HOUSE = "bold #c08a5a"
_RICH = "bold #e0c060"
_OFFICE = "#8fb3d9"
_STATION = "#a0a0c0"
_TOWER = "bold #b0d0f0"

SPRITES: dict[int, SpriteGlyph] = {
    Cell.BLANK: SpriteGlyph("  "),
    Cell.TREE: SpriteGlyph("♣♣", "bold green"),
    Cell.BRICK: SpriteGlyph("▓▓", "#b05a3a"),
    Cell.GRAY: SpriteGlyph("██", "grey50"),
    Cell.MAN: SpriteGlyph("☺ ", "bold cyan"),
    Cell.MAN2: SpriteGlyph(" ☺", "bold cyan"),
    Cell.GLOBALVIEW1: SpriteGlyph("/▔", _TOWER),
    Cell.GLOBALVIEW2: SpriteGlyph("▔▔", _TOWER),
    Cell.GLOBALVIEW3: SpriteGlyph("▔\\", _TOWER),
    Cell.GLOBALVIEW4: SpriteGlyph("▌▒", _TOWER),
    Cell.GLOBALVIEW5: SpriteGlyph("▒▐", _TOWER),
    Cell.GLOBALVIEW6: SpriteGlyph("▒▒", _TOWER),
    Cell.GLOBALVIEW7: SpriteGlyph("▯▯", _TOWER),
    Cell.GLOBALVIEW8: SpriteGlyph("▒▒", _TOWER),
    Cell.DR: SpriteGlyph("☻ ", "bold white"),
    Cell.DRHOUSE1: SpriteGlyph("/▔", _HOUSE),
    Cell.DRHOUSE2: SpriteGlyph("▔▔", _HOUSE),
    Cell.DRHOUSE3: SpriteGlyph("▔\\", _HOUSE),
    Cell.DRHOUSE4: SpriteGlyph("▯▯", _HOUSE),
    Cell.DRHOUSE5: SpriteGlyph("▐▌", _HOUSE),
    Cell.DRHOUSE6: SpriteGlyph("▐▌", _HOUSE),
    Cell.SLEEP: SpriteGlyph("zZ", "bold blue"),
    Cell.OFFICE1: SpriteGlyph("/▔", _OFFICE),
    Cell.OFFICE2: SpriteGlyph("▔\\", _OFFICE),
    Cell.SMILE: SpriteGlyph("^^", "bold yellow"),
    Cell.OFFICE3: SpriteGlyph("▐▌", _OFFICE),
    Cell.OFFICE4: SpriteGlyph("▯▯", _OFFICE),
    Cell.OFFICE5: SpriteGlyph("▐▌", _OFFICE),
    Cell.OFFICE6: SpriteGlyph("▔▔", _OFFICE),
    Cell.CHEMICAL: SpriteGlyph("⚗ ", "bold green"),
    Cell.RICHHOUSE1: SpriteGlyph("/▔", _RICH),
    Cell.RICHHOUSE2: SpriteGlyph("▔▔", _RICH),
    Cell.RICHHOUSE3: SpriteGlyph("▔▔", _RICH),
    Cell.RICHHOUSE4: SpriteGlyph("▔\\", _RICH),
    Cell.RICHHOUSE5: SpriteGlyph("▐▌", _RICH),
    Cell.RICHHOUSE6: SpriteGlyph("▯▯", _RICH),
    Cell.RICHHOUSE7: SpriteGlyph("▐▌", _RICH),
    Cell.RICHHOUSE8: SpriteGlyph("▦▦", _RICH),
    Cell.RICHHOUSE9: SpriteGlyph("▐▌", _RICH),
    Cell.ERROR: SpriteGlyph("??", "bold red"),
    Cell.RAPID1: SpriteGlyph("/▔", _STATION),
    Cell.RAPID2: SpriteGlyph("▔▔", _STATION),
    Cell.RAPID3: SpriteGlyph("▔\\", _STATION),
    Cell.RAPID4: SpriteGlyph("▐▌", _STATION),
    Cell.RAPID5: SpriteGlyph("▯▯", _STATION),
    Cell.RAPID6: SpriteGlyph("▐▌", _STATION),
    Cell.DOOR_CLOSED: SpriteGlyph("┃┃", "bold #8b5a2b"),
    Cell.DOOR_OPEN: SpriteGlyph("╎ ", "#8b5a2b"),
    Cell.STAIR1: SpriteGlyph("≡≡", "grey70"),
    Cell.STAIR2: SpriteGlyph("≡≡", "grey70"),
    Cell.FLOWER: SpriteGlyph("✿ ", "bold magenta"),
    Cell.HOME1: SpriteGlyph("/▔", "bold #d08050"),
    Cell.HOME2: SpriteGlyph("▔\\", "bold #d08050"),
    Cell.HOME3: SpriteGlyph("▯▯", "bold #d08050"),
    Cell.HOME4: SpriteGlyph("▐▌", "bold #d08050"),
    Cell.TABLE: SpriteGlyph("┬┬", "#a0703a"),
    Cell.CABINET: SpriteGlyph("▤▤", "#a0703a"),
    Cell.GIRL: SpriteGlyph("♀ ", "bold magenta"),
    Cell.BED: SpriteGlyph("▭▭", "#7090c0"),
    Cell.POLICE: SpriteGlyph("♙ ", "bold blue"),
    Cell.SLINGSHOT: SpriteGlyph("Y ", "#a0703a"),
    Cell.TICKET_MACHINE: SpriteGlyph("▣ ", "bold #a0a0c0"),
    Cell.MONEY: SpriteGlyph("$ ", "bold yellow"),
    Cell.TICKET: SpriteGlyph("▭ ", "bold #f0e0a0"),
    Cell.CELLPHONE: SpriteGlyph("▯ ", "bold white"),
    Cell.STREETLAMP: SpriteGlyph("¶ ", "yellow"),
    Cell.INVOICE: SpriteGlyph("≣ ", "white"),
    Cell.COMPUTER: SpriteGlyph("▭▭", "bold cyan"),
    Cell.CC800: SpriteGlyph("◘ ", "bold cyan"),
    Cell.WATER: SpriteGlyph("≈≈", "bold blue"),
    Cell.CABINET_OPEN: SpriteGlyph("▯▤", "#a0703a"),
    Cell.BADMAN_LEFT: SpriteGlyph("☹ ", "bold red"),
    Cell.BADMAN_RIGHT: SpriteGlyph(" ☹", "bold red"),
    Cell.RAPIDCAR1: SpriteGlyph("[▔", "bold #a0a0c0"),
    Cell.RAPIDCAR2: SpriteGlyph("▔▔", "bold #a0a0c0"),
    Cell.RAPIDCAR3: SpriteGlyph("▔]", "bold #a0a0c0"),
    Cell.TRACK: SpriteGlyph("══", "grey50"),
    Cell.CLOSESTOOL: SpriteGlyph("◛ ", "white"),
    Cell.TOILET_PAPER: SpriteGlyph("◎ ", "white"),
    Cell.SAD: SpriteGlyph("; ", "bold blue"),
    Cell.ASSISTANT: SpriteGlyph("☺ ", "bold green"),
}


def sprite_for(cell: int) -> SpriteGlyph:
    return SPRITES.get(int(cell), SPRITES[Cell.ERROR])
