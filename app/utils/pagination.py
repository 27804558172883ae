"""
Paginated listing helpers shared by the admin list endpoints
"""

import math

from flask import current_app, request
from sqlalchemy import or_

from app.utils.errors import ValidationError
from app.utils.validation import parse_enum


def page_args():
    """Read ``page`` and ``limit`` from the query string"""
    page = request.args.get('page', 1, type=int)
    limit = request.args.get('limit', current_app.config['DEFAULT_PAGE_SIZE'], type=int)
    return page, limit


def search_filter(term, *columns):
    """Case-insensitive substring match of ``term`` against any of ``columns``"""
    return or_(*[column.icontains(term, autoescape=True) for column in columns])


def enum_filter(column, enum_cls, value, field):
    """Exact match on an enum column; unknown values are a ValidationError"""
    return column == parse_enum(enum_cls, value, field)


def paginate_query(query, model, page=1, limit=10):
    """Newest-first page of ``query``

    Returns a dict with the page ``items``, the ``total`` number of matching
    rows and ``total_pages``. A page past the end is empty, not an error.
    """
    if page < 1:
        raise ValidationError('page must be 1 or greater')
    if limit < 1:
        raise ValidationError('limit must be 1 or greater')
    limit = min(limit, current_app.config['MAX_PAGE_SIZE'])

    total = query.count()
    total_pages = math.ceil(total / limit)

    # Offsets past the last page can overflow the store's integer type
    items = []
    if page <= total_pages:
        items = query.order_by(model.created_at.desc(), model.id.desc()).paginate(
            page=page, per_page=limit, error_out=False, count=False
        ).items

    return {
        'items': items,
        'total': total,
        'total_pages': total_pages,
        'current_page': page,
        'per_page': limit,
    }
