"""Single-answer puzzles: each takes a few numbers and returns one verdict."""

TICKET_PRICE = 5000
ADVITIYA_DAYS = frozenset({16, 17, 18})

_FESTIVAL_MESSAGES = {True: "ADVITIYA", False: "WAITING FOR ADVITIYA"}
_STATUS_TEXT = {True: "NOT FOUND", False: "FOUND"}
_MATERIAL = {True: "METAL", False: "PLASTIC"}
_SETTER = {True: "Tyro", False: "Dom"}


def advitiya_message(day):
    """Return the festival message for the given day of the month."""
    during_festival = day in ADVITIYA_DAYS
    return _FESTIVAL_MESSAGES[during_festival]


def ai_competition_ok(difference):
    """True when the time difference is at most 60."""
    return difference <= 60


def parole_eligible(days):
    """True when at least a week has been served."""
    return days >= 7


def coldplay_ticket_cost(friends):
    """Cost of tickets for the given number of friends plus oneself."""
    return (friends + 1) * TICKET_PRICE


def donut_calories(donuts, calories):
    """Total calories from eating ``donuts`` donuts of ``calories`` each."""
    return donuts * calories


def diwali_payment(price, discount):
    """Amount left to pay after a discount; never negative."""
    return max(0, price - discount)


def error_404_status(code):
    """Return the status text for a response code."""
    missing = code == 404
    return _STATUS_TEXT[missing]


def glass_or_plastic(x, y):
    """Pick METAL when it costs at most twice the plastic price."""
    metal_is_cheap = y <= 2 * x
    return _MATERIAL[metal_is_cheap]


def ice_cones(x, y):
    """Number of complete ice-cream cones from x cones and y scoops."""
    return min(x, y)


def ied_cost(chef, chefina, price):
    """Cost of the larger of the two quantities at the given unit price."""
    return max(chef, chefina) * price


def ioi_qualifies(rank):
    """True for ranks 1 through 8."""
    return 1 <= rank <= 8


def lucky_clock(n):
    """Value of the n-th term of the clock sequence starting at 4 with step 3."""
    return (n - 1) * 3 + 4


def mango_lassi(temperature):
    """True when it is hot enough for a mango lassi."""
    return temperature > 35


def movie_price(x, y, z):
    """Cheaper of the two ticket-and-snack combinations."""
    return min(2 * z + y, 2 * x + 3 * y)


def remaining_to_100(n):
    """How far n is from 100."""
    return 100 - n


def off_by_one(a, b):
    """The sum of a and b with a stray ``1`` written after it."""
    return f"{a + b}1"


def problem_setter(a, b):
    """Name of the setter: Tyro when a does not exceed b, otherwise Dom."""
    tyro_sets = a <= b
    return _SETTER[tyro_sets]