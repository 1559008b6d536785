"""Puzzles over a handful of integers, answered by small calculations."""


def ap_operations(x, y, z):
    """Operations needed to make x, y, z an arithmetic progression (0 or 1)."""
    already_progression = 2 * y == x + z
    return int(not already_progression)


def butterfly_possible(r, g, b):
    """True when no colour outnumbers the other two together."""
    largest = max(r, g, b)
    return largest <= r + g + b - largest


def card_game(n, x):
    """Count cards 1..n of the same parity as x, excluding x itself."""
    even_count = n // 2
    odd_count = n - even_count
    same_parity = even_count if x % 2 == 0 else odd_count
    return same_parity - (1 if x <= n else 0)


def even_odd_divisors(n):
    """1 if n has more even divisors, -1 if more odd ones, 0 if equal."""
    divisors = [d for d in range(1, n + 1) if n % d == 0]
    even = sum(1 for d in divisors if d % 2 == 0)
    odd = len(divisors) - even
    if even > odd:
        return 1
    if even == odd:
        return 0
    return -1


def add_two(a, b):
    """Sum of two numbers."""
    return a + b


def good_turn(x, y):
    """True when the two dice total more than six."""
    return x + y > 6


def literacy_ok(population, literate):
    """True when at least 75 percent of the population is literate."""
    return literate / population * 100 >= 75


def netflix_possible(a, b, c, x):
    """True when some pair of the three amounts reaches x."""
    return a + b >= x or a + c >= x or b + c >= x


def ratio_operations(x, y):
    """Decrements of the larger value until one is at least twice the other."""
    operations = 0
    while x < 2 * y and y < 2 * x:
        if x > y:
            y -= 1
        else:
            x -= 1
        operations += 1
    return operations


def max_rectangle_area(n):
    """Largest area of a rectangle with positive sides and perimeter at most n."""
    best = 0
    for length in range(1, n // 2 + 1):
        width = (n - 2 * length) // 2
        if width > 0:
            best = max(best, length * width)
    return best


def can_read_pages(n, x, y):
    """True when x days of y pages cover n pages."""
    return x * y >= n