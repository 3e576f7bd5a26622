from lostdoctor.domain.models.cell import Cell


ITEM_NAMES: dict[int, str] = {
    Cell.MONEY: "Money",
    Cell.CELLPHONE: "Mobile phone",
    Cell.SLINGSHOT: "Slingshot",
    Cell.TICKET: "Train ticket",
    Cell.INVOICE: "Repair slip",
    Cell.CC800: "CC800",
    Cell.TOILET_PAPER: "Toilet paper",
}

# The lookup has no "unknown" entry: any id missing from the table is named
# after the solvent, which is the only other item the story hands out.
FALLBACK_ITEM_NAME = "Bacteria solvent"

STARTING_ITEMS: tuple[int, ...] = (Cell.MONEY, Cell.CELLPHONE)


def item_name(item_id: int) -> str:
    return ITEM_NAMES.get(int(item_id), FALLBACK_ITEM_NAME)
