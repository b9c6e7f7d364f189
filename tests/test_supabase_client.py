# =============================================================================
# tests/test_supabase_client.py - Supabase Wrapper Tests
# =============================================================================
# The Supabase client is replaced by a MagicMock, so these tests check
# which queries are built and how PostgREST errors are mapped.
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from lib.supabase_client import SupabaseClient, SupabaseClientError


@pytest.fixture
def client():
    """Mocked supabase Client returned by SupabaseClient.get_client()."""
    mock_client = MagicMock()
    with patch.object(SupabaseClient, "get_client", return_value=mock_client):
        yield mock_client


def single_query(client):
    """The chain table().select().eq().single()."""
    return client.table.return_value.select.return_value.eq.return_value.single.return_value


class TestFetchUserByToken:

    def test_queries_users_by_token(self, client):
        single_query(client).execute.return_value.data = {
            "id": "u1",
            "token_identifier": "tok",
            "role": "admin",
            "is_super_admin": False,
        }

        user = SupabaseClient.fetch_user_by_token("tok")

        client.table.assert_called_once_with("users")
        client.table.return_value.select.return_value.eq.assert_called_once_with("token_identifier", "tok")
        assert user["role"] == "admin"

    def test_no_rows_returns_none(self, client):
        single_query(client).execute.side_effect = Exception("{'code': 'PGRST116'}")

        assert SupabaseClient.fetch_user_by_token("tok") is None

    def test_other_errors_raise(self, client):
        single_query(client).execute.side_effect = Exception("connection refused")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.fetch_user_by_token("tok")

        assert exc_info.value.code == "FETCH_USER_FAILED"


class TestKeyedSettings:

    def test_fetch_setting_missing(self, client):
        single_query(client).execute.side_effect = Exception("PGRST116: no rows")

        assert SupabaseClient.fetch_setting("verification_price") is None

    def test_upsert_uses_key_conflict_target(self, client):
        upsert = client.table.return_value.upsert
        upsert.return_value.execute.return_value.data = [{"id": "s1", "key": "k", "value": "v"}]

        row = SupabaseClient.upsert_setting("k", "v")

        client.table.assert_called_once_with("settings")
        upsert.assert_called_once_with({"key": "k", "value": "v"}, on_conflict="key")
        assert row["id"] == "s1"

    def test_upsert_without_data_raises(self, client):
        client.table.return_value.upsert.return_value.execute.return_value.data = []

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.upsert_setting("k", "v")

        assert exc_info.value.code == "UPSERT_NO_DATA"

    def test_list_settings_empty(self, client):
        client.table.return_value.select.return_value.execute.return_value.data = None

        assert SupabaseClient.list_settings() == []


class TestSingletonRows:

    def test_fetch_singleton_first_row(self, client):
        limit = client.table.return_value.select.return_value.limit
        limit.return_value.execute.return_value.data = [{"id": "w1", "max_level": 100}]

        row = SupabaseClient.fetch_singleton("wallet_settings")

        limit.assert_called_once_with(1)
        assert row == {"id": "w1", "max_level": 100}

    def test_fetch_singleton_empty_table(self, client):
        client.table.return_value.select.return_value.limit.return_value.execute.return_value.data = []

        assert SupabaseClient.fetch_singleton("wallet_settings") is None

    def test_insert_unique_violation(self, client):
        client.table.return_value.insert.return_value.execute.side_effect = Exception(
            "duplicate key value violates unique constraint (23505)"
        )

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.insert_row("wallet_settings", {"max_level": 100})

        assert exc_info.value.code == "UNIQUE_VIOLATION"

    def test_insert_returns_row(self, client):
        client.table.return_value.insert.return_value.execute.return_value.data = [{"id": "w1"}]

        assert SupabaseClient.insert_row("wallet_settings", {"max_level": 100}) == {"id": "w1"}

    def test_update_row_targets_id(self, client):
        update = client.table.return_value.update
        update.return_value.eq.return_value.execute.return_value.data = [{"id": "w1", "max_level": 5}]

        row = SupabaseClient.update_row("wallet_settings", "w1", {"max_level": 5})

        update.assert_called_once_with({"max_level": 5})
        update.return_value.eq.assert_called_once_with("id", "w1")
        assert row["max_level"] == 5


class TestClientError:

    def test_str_includes_code_and_suggestion(self):
        error = SupabaseClientError("boom", code="X", suggestion="retry")
        assert str(error) == "[X] boom Suggestion: retry"
