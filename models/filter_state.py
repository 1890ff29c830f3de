from dataclasses import dataclass, replace


@dataclass(frozen=True)
class FilterState:
    time_window: str = "all"    # 'all' | 'year' | 'month' | 'week' | 'day'
    type_filter: str = "all"    # 'all' | 'income' | 'expense'
    search: str = ""

    def with_changes(self, **changes) -> "FilterState":
        return replace(self, **changes)
