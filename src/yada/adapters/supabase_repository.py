"""Supabase repositories for foods and log entries."""

from dataclasses import dataclass

from supabase import Client

from yada.domain.records import FoodRecord, LogRecord
from yada.services.storage import FoodRepository, LogRepository, parse_records


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed food storage in the ``foods`` table, keyed by id."""

    client: Client

    def load_foods(self) -> list[FoodRecord]:
        """Return every stored food record."""
        response = (
            self.client.table("foods")
            .select("id, kind, keywords, calories, components")
            .order("position", desc=False)
            .execute()
        )
        return parse_records(response.data or [], FoodRecord)

    def save_foods(self, records: list[FoodRecord]) -> None:
        """Upsert the given records, then drop rows for foods no longer present."""
        payload = [
            {"position": position, **record.model_dump(mode="json")}
            for position, record in enumerate(records)
        ]
        if payload:
            response = (
                self.client.table("foods").upsert(payload, on_conflict="id").execute()
            )
            if not response.data:
                raise RuntimeError("Failed to save foods")
            ids = [record.id for record in records]
            self.client.table("foods").delete().not_.in_("id", ids).execute()
        else:
            self.client.table("foods").delete().neq("id", "").execute()


@dataclass
class SupabaseLogRepository(LogRepository):
    """Supabase-backed log storage in the ``log_entries`` table.

    Rows are keyed by ``position``, the entry's index in the saved list.
    """

    client: Client

    def load_logs(self) -> list[LogRecord]:
        """Return stored log records ordered by date then position."""
        response = (
            self.client.table("log_entries")
            .select("date, food_id, servings, calories")
            .order("date", desc=False)
            .order("position", desc=False)
            .execute()
        )
        return parse_records(response.data or [], LogRecord)

    def save_logs(self, records: list[LogRecord]) -> None:
        """Upsert the given records, then drop rows past the new end."""
        payload = [
            {"position": position, **record.model_dump(mode="json")}
            for position, record in enumerate(records)
        ]
        if payload:
            response = (
                self.client.table("log_entries")
                .upsert(payload, on_conflict="position")
                .execute()
            )
            if not response.data:
                raise RuntimeError("Failed to save log entries")
        self.client.table("log_entries").delete().gte(
            "position", len(payload)
        ).execute()
