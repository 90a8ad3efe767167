# core/query.py
"""
Search, status filtering and pagination over in-memory collections.

Page content and page count are both derived from filter_entities(), so the
number of pages always agrees with what the pages contain.
"""

import math
from dataclasses import dataclass, replace


STATUS_FILTER_ALL = 'all'

STATUS_FILTER_CHOICES = [
    (STATUS_FILTER_ALL, 'All Status'),
    ('active', 'Active'),
    ('inactive', 'Inactive'),
    ('blocked', 'Blocked'),
]

STATUS_FILTER_VALUES = tuple(value for value, _ in STATUS_FILTER_CHOICES)

RESTAURANT_SEARCH_FIELDS = ('name', 'city', 'state')
CATEGORY_SEARCH_FIELDS = ('name', 'description')

DEFAULT_ITEMS_PER_PAGE = 10


def matches_search(entity, search_term, search_fields=RESTAURANT_SEARCH_FIELDS):
    """Case-insensitive substring match against any of the search fields"""
    needle = search_term.casefold()
    for field_name in search_fields:
        value = getattr(entity, field_name, None) or ''
        if needle in str(value).casefold():
            return True
    return False


def filter_entities(collection, search_term='', status_filter=STATUS_FILTER_ALL,
                    search_fields=RESTAURANT_SEARCH_FIELDS):
    """Apply the filter predicate, preserving collection order"""
    filtered = list(collection)

    if search_term:
        filtered = [
            entity for entity in filtered
            if matches_search(entity, search_term, search_fields)
        ]

    if status_filter != STATUS_FILTER_ALL:
        filtered = [
            entity for entity in filtered if entity.status == status_filter
        ]

    return filtered


def _slice_page(filtered, page, page_size):
    if page < 1:
        return []
    start = (page - 1) * page_size
    return filtered[start:start + page_size]


def _count_pages(filtered_count, page_size):
    return math.ceil(filtered_count / page_size)


def get_filtered_page(collection, search_term, status_filter, page, page_size,
                      search_fields=RESTAURANT_SEARCH_FIELDS):
    """Entities shown on `page`; empty when the page is out of range."""
    filtered = filter_entities(
        collection, search_term, status_filter, search_fields)
    return _slice_page(filtered, page, page_size)


def get_total_pages(collection, search_term, status_filter, page_size,
                    search_fields=RESTAURANT_SEARCH_FIELDS):
    filtered = filter_entities(
        collection, search_term, status_filter, search_fields)
    return _count_pages(len(filtered), page_size)


@dataclass(frozen=True)
class Page:
    """One page of a filtered collection plus the numbers a pager needs"""
    items: tuple
    number: int
    page_size: int
    total_pages: int
    filtered_count: int
    total_count: int

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    @property
    def has_previous(self):
        return self.number > 1

    @property
    def has_next(self):
        return self.number < self.total_pages

    @property
    def previous_page_number(self):
        return max(1, self.number - 1)

    @property
    def next_page_number(self):
        return min(self.total_pages, self.number + 1) or 1

    @property
    def start_index(self):
        if not self.items:
            return 0
        return (self.number - 1) * self.page_size + 1

    @property
    def end_index(self):
        if not self.items:
            return 0
        return self.start_index + len(self.items) - 1

    @property
    def page_range(self):
        return range(1, self.total_pages + 1)


def paginate(collection, query, search_fields=RESTAURANT_SEARCH_FIELDS):
    """Filter once, then slice and count from the same result"""
    collection = list(collection)
    filtered = filter_entities(
        collection, query.search_term, query.status_filter, search_fields)

    return Page(
        items=tuple(_slice_page(
            filtered, query.current_page, query.items_per_page)),
        number=query.current_page,
        page_size=query.items_per_page,
        total_pages=_count_pages(len(filtered), query.items_per_page),
        filtered_count=len(filtered),
        total_count=len(collection),
    )


@dataclass(frozen=True)
class QueryState:
    """Search text, status filter and page for one list view.

    Setting the search term or the status filter always returns to page 1,
    so a page number from an old result set is never shown against a new one.
    """
    search_term: str = ''
    status_filter: str = STATUS_FILTER_ALL
    current_page: int = 1
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE

    def __post_init__(self):
        if self.status_filter not in STATUS_FILTER_VALUES:
            raise ValueError(f"Invalid status filter: {self.status_filter!r}")
        if self.current_page < 1:
            raise ValueError("current_page must be at least 1")

    @property
    def is_filtered(self):
        return bool(self.search_term) or self.status_filter != STATUS_FILTER_ALL

    def with_search(self, search_term):
        return replace(self, search_term=search_term, current_page=1)

    def with_status(self, status_filter):
        return replace(self, status_filter=status_filter, current_page=1)

    def with_page(self, page):
        return replace(self, current_page=max(1, int(page)))

    def reset_page(self):
        return replace(self, current_page=1)

    def clamped(self, total_pages):
        """Pull the page back inside 1..total_pages"""
        last_page = max(1, total_pages)
        if self.current_page > last_page:
            return replace(self, current_page=last_page)
        return self

    def to_dict(self):
        return {
            'search_term': self.search_term,
            'status_filter': self.status_filter,
            'current_page': self.current_page,
        }

    @classmethod
    def from_dict(cls, data, items_per_page=DEFAULT_ITEMS_PER_PAGE):
        data = data or {}
        status_filter = data.get('status_filter', STATUS_FILTER_ALL)
        if status_filter not in STATUS_FILTER_VALUES:
            status_filter = STATUS_FILTER_ALL

        try:
            current_page = max(1, int(data.get('current_page', 1)))
        except (TypeError, ValueError):
            current_page = 1

        return cls(
            search_term=str(data.get('search_term', '')),
            status_filter=status_filter,
            current_page=current_page,
            items_per_page=items_per_page,
        )

    @classmethod
    def from_params(cls, params, previous=None,
                    items_per_page=DEFAULT_ITEMS_PER_PAGE):
        """Apply request parameters (search, status, page) on top of `previous`.

        A page parameter is ignored when the same request changes the
        search term or the status filter.
        """
        state = previous or cls(items_per_page=items_per_page)
        filters_changed = False

        if 'search' in params:
            search_term = params.get('search', '').strip()
            if search_term != state.search_term:
                state = state.with_search(search_term)
                filters_changed = True

        if 'status' in params:
            status_filter = params.get('status', STATUS_FILTER_ALL)
            if status_filter not in STATUS_FILTER_VALUES:
                status_filter = STATUS_FILTER_ALL
            if status_filter != state.status_filter:
                state = state.with_status(status_filter)
                filters_changed = True

        if 'page' in params and not filters_changed:
            try:
                state = state.with_page(params.get('page'))
            except (TypeError, ValueError):
                state = state.reset_page()

        return state


# Query state per list view, kept in the Django session between requests
QUERY_SESSION_PREFIX = 'query:'


def query_session_key(list_name):
    return f"{QUERY_SESSION_PREFIX}{list_name}"


def load_query_state(django_session, list_name, params=None,
                     items_per_page=DEFAULT_ITEMS_PER_PAGE):
    """Stored state for a list view with this request's parameters applied"""
    previous = QueryState.from_dict(
        django_session.get(query_session_key(list_name)), items_per_page)
    if params is None:
        return previous
    return QueryState.from_params(
        params, previous=previous, items_per_page=items_per_page)


def save_query_state(django_session, list_name, state):
    django_session[query_session_key(list_name)] = state.to_dict()


def clear_query_states(django_session):
    for key in [k for k in django_session.keys() if k.startswith(QUERY_SESSION_PREFIX)]:
        del django_session[key]


def resolve_list_page(request, list_name, collection, search_fields,
                      items_per_page=DEFAULT_ITEMS_PER_PAGE):
    """Page of `collection` for a list view, with its query state kept in the session.

    A page past the end (e.g. after the last item on it was deleted) is
    pulled back to the last page before rendering.
    """
    state = load_query_state(
        request.session, list_name, request.GET, items_per_page)
    page = paginate(collection, state, search_fields)

    if state.current_page > max(1, page.total_pages):
        state = state.clamped(page.total_pages)
        page = paginate(collection, state, search_fields)

    save_query_state(request.session, list_name, state)
    return page, state
