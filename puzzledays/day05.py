"""Check page updates against ordering rules and repair the broken ones."""

from dataclasses import dataclass, field
from functools import cmp_to_key


@dataclass
class Solver:
    """Ordering rules (page -> pages that must come after it) and updates."""

    rules: dict = field(default_factory=dict)
    updates: list = field(default_factory=list)

    def validate_updates(self):
        """Split updates into (valid, invalid), keeping their order."""
        valid, invalid = [], []
        for update in self.updates:
            (valid if self.is_valid(update) else invalid).append(update)
        return valid, invalid

    def is_valid(self, update):
        """True when every page has a rule placing it before all later pages."""
        return all(
            all(later in self.rules.get(page, ()) for later in update[i + 1:])
            for i, page in enumerate(update)
        )

    def fix(self, update):
        """Return the update reordered to satisfy the rules."""

        def compare(a, b):
            return -1 if b in self.rules.get(a, ()) else 1

        return sorted(update, key=cmp_to_key(compare))


def parse_solver(text):
    """Parse 'a|b' rule lines, a blank line, then comma-separated updates."""
    rules = {}
    updates = []
    rules_done = False
    for line in text.splitlines():
        if not line:
            rules_done = True
            continue
        if rules_done:
            updates.append([int(x) for x in line.split(",")])
        else:
            before, after = (int(x) for x in line.split("|")[:2])
            rules.setdefault(before, set()).add(after)
    return Solver(rules, updates)


def middle_page_sum(updates):
    """Sum of the middle page of each update."""
    return sum(update[len(update) // 2] for update in updates)


def part1(text):
    solver = parse_solver(text)
    valid, _ = solver.validate_updates()
    return middle_page_sum(valid)


def part2(text):
    solver = parse_solver(text)
    _, invalid = solver.validate_updates()
    return middle_page_sum(solver.fix(update) for update in invalid)