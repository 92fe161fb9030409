"""Visitors that inspect the items of a game without type checks."""

from __future__ import annotations

from typing import Any


class ItemVisitor:
    """Base visitor: every visit does nothing unless overridden."""

    def visit_given(self, given: Any) -> None:
        """Visit a given number."""

    def visit_digit(self, digit: Any) -> None:
        """Visit a movable digit."""

    def visit_sparty(self, sparty: Any) -> None:
        """Visit the player character."""

    def visit_container(self, container: Any) -> None:
        """Visit a container."""

    def visit_xray(self, xray: Any) -> None:
        """Visit the x-ray stomach."""

    def visit_team_feature(self, team_feature: Any) -> None:
        """Visit the level-3 helper character."""


class DigitVisitor(ItemVisitor):
    """Records the last digit visited and how many digits were seen."""

    def __init__(self) -> None:
        self.digit: Any = None
        self.digit_count = 0
        self._is_digit = False

    def visit_digit(self, digit: Any) -> None:
        self.digit = digit
        self._is_digit = True
        self.digit_count += 1

    def is_digit(self) -> bool:
        """True once a digit has been visited."""
        return self._is_digit

    def value(self) -> int:
        """Value of the last digit visited."""
        if self.digit is None:
            raise ValueError("no digit has been visited")
        return self.digit.value


class GivenVisitor(ItemVisitor):
    """Records the last given visited and how many givens were seen."""

    def __init__(self) -> None:
        self.given: Any = None
        self.given_count = 0
        self._is_given = False

    def visit_given(self, given: Any) -> None:
        self.given = given
        self._is_given = True
        self.given_count += 1

    def is_given(self) -> bool:
        """True once a given has been visited."""
        return self._is_given

    def value(self) -> int:
        """Value of the last given visited."""
        if self.given is None:
            raise ValueError("no given has been visited")
        return self.given.value


class IsContainerVisitor(ItemVisitor):
    """Detects a container among the visited items."""

    def __init__(self) -> None:
        self.container: Any = None
        self._is_container = False

    def visit_container(self, container: Any) -> None:
        self.container = container
        self._is_container = True

    def is_container(self) -> bool:
        """True once a container has been visited."""
        return self._is_container


class XrayFinder(ItemVisitor):
    """Finds the x-ray among the visited items."""

    def __init__(self) -> None:
        self.xray: Any = None

    def visit_xray(self, xray: Any) -> None:
        self.xray = xray


class TeamFeatureVisitor(ItemVisitor):
    """Finds the team feature among the visited items."""

    def __init__(self) -> None:
        self.team_feature: Any = None
        self._is_team_feature = False

    def visit_team_feature(self, team_feature: Any) -> None:
        self.team_feature = team_feature
        self._is_team_feature = True

    def is_team_feature(self) -> bool:
        """True once a team feature has been visited."""
        return self._is_team_feature

    def set_target_location(self, x: int, y: int) -> None:
        """Send the found team feature towards (x, y)."""
        if self.team_feature is None:
            raise ValueError("no team feature has been visited")
        self.team_feature.set_target_location(x, y)