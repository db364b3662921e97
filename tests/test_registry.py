"""Tests for the category and profile registries."""

from dcgen.registry import (
    CATEGORIES,
    PROFILES,
    TEST_FIXTURE,
    category_names,
    category_tools,
    profile_categories,
    profile_names,
)


class TestCategories:
    """Test category lookups."""

    def test_known_category(self) -> None:
        """Test that tools are returned in declaration order."""
        assert category_tools("Node") == ("nodejs", "npm", "yarn")
        assert category_tools("Editors") == ("nano", "neovim")

    def test_unknown_category(self) -> None:
        """Test that unknown or differently cased names are not found."""
        assert category_tools("Go") is None
        assert category_tools("python") is None

    def test_test_fixture(self) -> None:
        """Test the reserved self-test category."""
        assert category_tools(TEST_FIXTURE) == ("git", "curl", "ca-certificates", "nano", "binutils")

    def test_category_names(self) -> None:
        """Test that all categories are listed in order."""
        names = category_names()
        assert names[0] == "C"
        assert "Debugging/RE" in names
        assert names[-1] == TEST_FIXTURE


class TestProfiles:
    """Test profile lookups."""

    def test_known_profile(self) -> None:
        """Test that categories are returned in declaration order."""
        assert profile_categories("DataScience") == ("Python", "Editors", "Database")

    def test_unknown_profile(self) -> None:
        """Test that unknown profiles are not found."""
        assert profile_categories("GameDev") is None

    def test_test_fixture(self) -> None:
        """Test that the test profile maps to the test category."""
        assert profile_categories(TEST_FIXTURE) == (TEST_FIXTURE,)

    def test_profiles_reference_known_categories(self) -> None:
        """Test that every profile only references registered categories."""
        for categories in PROFILES.values():
            assert all(category in CATEGORIES for category in categories)

    def test_profile_names(self) -> None:
        """Test that all profiles are listed in order."""
        assert profile_names() == ["WebDev", "Embedded", "DataScience", "RE", "FullStack", "test"]
