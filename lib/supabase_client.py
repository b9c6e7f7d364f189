# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides specialized methods for:
# - Resolving users by auth token identifier (the "by_token" lookup)
# - Keyed settings (settings table, unique on key)
# - Singleton settings tables (at most one row each)
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   row = SupabaseClient.fetch_setting("verification_price")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code for ".single()" matching no rows
NO_ROWS_CODE = "PGRST116"
# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION_CODE = "23505"

USERS_TABLE = "users"
SETTINGS_TABLE = "settings"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Provides actionable error messages:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods, so the class itself
    is the database handle passed to ConfigStore.

    Example:
        user = SupabaseClient.fetch_user_by_token("5f0c...")
        pricing = SupabaseClient.fetch_singleton("fortune_pricing")
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        Authorization is enforced by this service before any write.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def _normalize_uuid(cls, uuid_value: str | UUID) -> str:
        """Convert UUID to string for queries."""
        return str(uuid_value) if isinstance(uuid_value, UUID) else uuid_value

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_user_by_token(cls, token_identifier: str) -> dict[str, Any] | None:
        """
        Fetch the user row linked to an auth token identifier.

        Only the columns needed for authorization are selected.

        Args:
            token_identifier: Opaque identifier from the identity provider

        Returns:
            User dict (id, token_identifier, role, is_super_admin), or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(USERS_TABLE)
                .select("id, token_identifier, role, is_super_admin")
                .eq("token_identifier", token_identifier)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            if NO_ROWS_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch user: {e}",
                code="FETCH_USER_FAILED",
                suggestion="Check that the users table is accessible and token_identifier is unique",
            )

    # -------------------------------------------------------------------------
    # Keyed Settings
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_setting(cls, key: str) -> dict[str, Any] | None:
        """
        Fetch a keyed setting row.

        Args:
            key: The setting key

        Returns:
            Setting dict (id, key, value), or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(SETTINGS_TABLE)
                .select("id, key, value")
                .eq("key", key)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            if NO_ROWS_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch setting: {e}",
                code="FETCH_SETTING_FAILED",
                details={"key": key}
            )

    @classmethod
    def list_settings(cls) -> list[dict[str, Any]]:
        """
        Fetch every keyed setting.

        Returns:
            List of setting dicts, unordered

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(SETTINGS_TABLE)
                .select("id, key, value")
                .execute()
            )

            rows = response.data or []
            logger.debug(f"Fetched {len(rows)} keyed settings")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to list settings: {e}",
                code="LIST_SETTINGS_FAILED",
            )

    @classmethod
    def upsert_setting(cls, key: str, value: str) -> dict[str, Any]:
        """
        Insert a keyed setting or replace its value.

        Runs as one INSERT ... ON CONFLICT (key) DO UPDATE statement, so
        concurrent writers to the same key serialize in the database.

        Args:
            key: The setting key
            value: The new value

        Returns:
            The stored setting dict

        Raises:
            SupabaseClientError: If the upsert fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(SETTINGS_TABLE)
                .upsert({"key": key, "value": value}, on_conflict="key")
                .execute()
            )

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Upsert returned no data",
                code="UPSERT_NO_DATA",
                details={"key": key}
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to upsert setting: {e}",
                code="UPSERT_SETTING_FAILED",
                suggestion="Check that settings.key has a unique index",
                details={"key": key}
            )

    # -------------------------------------------------------------------------
    # Singleton Settings
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_singleton(cls, table: str) -> dict[str, Any] | None:
        """
        Fetch the single row of a singleton settings table.

        Args:
            table: Table name (e.g. "wallet_settings")

        Returns:
            Row dict, or None if the table is empty

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .select("*")
                .limit(1)
                .execute()
            )

            rows = response.data or []
            return rows[0] if rows else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch {table}: {e}",
                code="FETCH_SINGLETON_FAILED",
                details={"table": table}
            )

    @classmethod
    def insert_row(cls, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it with its generated id.

        Args:
            table: Table name
            data: Column values

        Returns:
            Inserted row dict

        Raises:
            SupabaseClientError: code UNIQUE_VIOLATION if a unique constraint
                rejected the row, INSERT_ROW_FAILED otherwise
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .insert(data)
                .execute()
            )

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA",
                details={"table": table}
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            if UNIQUE_VIOLATION_CODE in str(e):
                raise SupabaseClientError(
                    message=f"Row already exists in {table}",
                    code="UNIQUE_VIOLATION",
                    details={"table": table}
                )
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="INSERT_ROW_FAILED",
                details={"table": table}
            )

    @classmethod
    def update_row(
        cls,
        table: str,
        row_id: str | UUID,
        data: dict[str, Any],
    ) -> dict[str, Any] | None:
        """
        Patch the given columns of a row, leaving the others untouched.

        Args:
            table: Table name
            row_id: Primary key of the row
            data: Columns to overwrite

        Returns:
            Updated row dict, or None if the row no longer exists

        Raises:
            SupabaseClientError: If the update fails
        """
        client = cls.get_client()
        row_id_str = cls._normalize_uuid(row_id)

        try:
            response = (
                client.table(table)
                .update(data)
                .eq("id", row_id_str)
                .execute()
            )

            rows = response.data or []
            return rows[0] if rows else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update {table}: {e}",
                code="UPDATE_ROW_FAILED",
                details={"table": table, "id": row_id_str}
            )
