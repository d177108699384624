from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict

from planner_dashboard.data.query_client import QueryClient


@dataclass
class DashboardContext:
    client: QueryClient
    api_base_url: str
    today: date = field(default_factory=date.today)
    extras: Dict[str, Any] = field(default_factory=dict)

    def get(self, key, default=None):
        return self.extras.get(key, default)
