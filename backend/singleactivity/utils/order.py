from singleactivity.extensions import db

def compact_order(query, order_field="order"):
    """
    Re-assigns sequential order values (1..N) for a scoped query.
    """
    entity = query.column_descriptions[0]["entity"]
    items = query.order_by(getattr(entity, order_field).asc()).all()

    for index, item in enumerate(items, start=1):
        setattr(item, order_field, index)

    db.session.flush()

def next_order(query, order_field="order"):
    """
    Order value that appends an item after everything in a scoped query.
    """
    entity = query.column_descriptions[0]["entity"]
    current = query.with_entities(db.func.max(getattr(entity, order_field))).scalar()
    return (current or 0) + 1
