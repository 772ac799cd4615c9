"""Tests for prompt construction."""

from cachegen import (
    AnalyzedSchema,
    ConfigPreferences,
    build_system_prompt,
    build_user_prompt,
    render_schema_summary,
)


class TestSystemPrompt:
    """Tests for the fixed system prompt."""

    def test_describes_reply_fields(self) -> None:
        """Test the system prompt describes the reply fields."""
        prompt = build_system_prompt()

        for key in ("maxAge", "staleWhileRevalidate", "staleIfError", "scope", "passthrough"):
            assert key in prompt
        for key in ("rules", "invalidations", "explanation", "confidence", "warnings"):
            assert f"- {key}:" in prompt

    def test_stable(self) -> None:
        """Test the system prompt does not change between calls."""
        assert build_system_prompt() == build_system_prompt()


class TestUserPrompt:
    """Tests for build_user_prompt."""

    def test_embeds_summary(self, blog_schema: AnalyzedSchema) -> None:
        """Test the user prompt embeds the schema summary."""
        prompt = build_user_prompt(blog_schema)

        assert prompt.startswith(
            "Analyze the following GraphQL schema and generate caching configuration:"
        )
        assert render_schema_summary(blog_schema) in prompt
        assert prompt.endswith("Respond with valid JSON only.")

    def test_no_preferences_section_by_default(
        self, blog_schema: AnalyzedSchema
    ) -> None:
        """Test the preferences section is omitted without preferences."""
        assert "User Preferences" not in build_user_prompt(blog_schema)

    def test_all_preferences(self, blog_schema: AnalyzedSchema) -> None:
        """Test every preference is rendered."""
        preferences = ConfigPreferences(
            default_ttl="long",
            aggressive_caching=True,
            no_cache_types=["Session", "Token"],
            private_types=["User"],
            custom_hints="Traffic peaks on Mondays",
        )

        prompt = build_user_prompt(blog_schema, preferences)

        assert "\n## User Preferences\n\n" in prompt
        assert "- Preferred default TTL: long (900-3600s)\n" in prompt
        assert "- Aggressive caching: Yes, prioritize performance\n" in prompt
        assert "- Types that should never be cached: Session, Token\n" in prompt
        assert "- Types that should be private (user-specific): User\n" in prompt
        assert "- Additional context: Traffic peaks on Mondays\n" in prompt

    def test_freshness_preference(self, blog_schema: AnalyzedSchema) -> None:
        """Test the freshness preference is rendered."""
        prompt = build_user_prompt(
            blog_schema, ConfigPreferences(aggressive_caching=False)
        )

        assert "- Aggressive caching: No, prioritize freshness\n" in prompt
        assert "Preferred default TTL" not in prompt

    def test_empty_lists_omitted(self, blog_schema: AnalyzedSchema) -> None:
        """Test empty preference lists are omitted."""
        prompt = build_user_prompt(
            blog_schema, ConfigPreferences(default_ttl="short")
        )

        assert "- Preferred default TTL: short (60-300s)\n" in prompt
        assert "never be cached" not in prompt
        assert "should be private" not in prompt
