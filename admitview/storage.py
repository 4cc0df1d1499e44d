import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from .database import ApplicationView


def diff_dict(old: Dict[str, Any], new: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    changed = {}
    keys = set(old.keys()) | set(new.keys())
    for k in keys:
        ov = old.get(k)
        nv = new.get(k)
        if ov != nv:
            changed[k] = {"old": ov, "new": nv}
    return changed


def _dump(view: Dict[str, Any]) -> str:
    return json.dumps(view, sort_keys=True, ensure_ascii=False)


def save_view(session, application_id: str, view: Dict[str, Any]) -> Dict[str, Any]:
    """Insert or update the stored view. Commits the session."""
    row = session.get(ApplicationView, application_id)
    if row is None:
        session.add(ApplicationView(
            application_id=application_id,
            method=view.get("method"),
            total_score=view.get("totalScore") or 0,
            priority_score=view.get("priority", {}).get("score") or 0,
            payload=_dump(view),
        ))
        session.commit()
        return {"status": "new", "changed": {}}

    old = json.loads(row.payload)
    changed = diff_dict(old, view)
    if not changed:
        return {"status": "no-change", "changed": {}}

    row.method = view.get("method")
    row.total_score = view.get("totalScore") or 0
    row.priority_score = view.get("priority", {}).get("score") or 0
    row.payload = _dump(view)
    row.updated_at = datetime.now()
    session.commit()
    return {"status": "updated", "changed": changed}


def get_view(session, application_id: str) -> Optional[Dict[str, Any]]:
    row = session.get(ApplicationView, application_id)
    return json.loads(row.payload) if row is not None else None


def list_views(session) -> List[ApplicationView]:
    return session.query(ApplicationView).order_by(ApplicationView.application_id).all()
