"""
Storage Service - users, saved job descriptions and questionnaire drafts.

Tables:
1. users             - account records with bcrypt password hashes
2. job_descriptions  - generated JD text plus the answers that produced it
3. jd_drafts         - one in-progress questionnaire per user (overwritten)

Job descriptions and drafts are always scoped to their owner.
"""

import json
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import text

from recruitai.core.errors import NotFoundError
from recruitai.db.database import get_db_session


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_id() -> str:
    return uuid.uuid4().hex


def _row_to_dict(row) -> Optional[dict]:
    if row is None:
        return None
    return dict(row._mapping)


# ============================================================
# USERS
# ============================================================

class UserService:
    def create(self, first: str, last: str, username: str, email: str, password_hash: str) -> dict:
        user = {
            "id": _new_id(),
            "first": first,
            "last": last,
            "username": username,
            "email": email,
            "password_hash": password_hash,
            "created_at": _now(),
        }
        with get_db_session() as db:
            db.execute(
                text("""
                    INSERT INTO users (id, first, last, username, email, password_hash, created_at)
                    VALUES (:id, :first, :last, :username, :email, :password_hash, :created_at)
                """),
                user
            )
        return user

    def get(self, user_id: str) -> Optional[dict]:
        with get_db_session() as db:
            result = db.execute(text("SELECT * FROM users WHERE id = :id"), {"id": user_id})
            return _row_to_dict(result.fetchone())

    def get_by_username(self, username: str) -> Optional[dict]:
        """Case-insensitive username lookup."""
        with get_db_session() as db:
            result = db.execute(
                text("SELECT * FROM users WHERE LOWER(username) = LOWER(:username)"),
                {"username": username}
            )
            return _row_to_dict(result.fetchone())

    def username_taken(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def email_taken(self, email: str) -> bool:
        with get_db_session() as db:
            result = db.execute(
                text("SELECT id FROM users WHERE LOWER(email) = LOWER(:email)"),
                {"email": email}
            )
            return result.fetchone() is not None


# ============================================================
# JOB DESCRIPTIONS
# ============================================================

def _jd_from_row(row) -> Optional[dict]:
    jd = _row_to_dict(row)
    if jd is not None:
        jd["answers"] = json.loads(jd.get("answers") or "{}")
    return jd


class JobDescriptionStore:
    def save(self, owner_id: str, title: str, location: str, content: str,
             answers: Dict[str, Any]) -> dict:
        now = _now()
        jd = {
            "id": _new_id(),
            "owner_id": owner_id,
            "title": title or "",
            "location": location or "",
            "content": content,
            "answers": json.dumps(answers or {}),
            "created_at": now,
            "updated_at": now,
        }
        with get_db_session() as db:
            db.execute(
                text("""
                    INSERT INTO job_descriptions
                        (id, owner_id, title, location, content, answers, created_at, updated_at)
                    VALUES (:id, :owner_id, :title, :location, :content, :answers, :created_at, :updated_at)
                """),
                jd
            )
        jd["answers"] = answers or {}
        return jd

    def list(self, owner_id: str) -> List[dict]:
        """Newest first."""
        with get_db_session() as db:
            result = db.execute(
                text("""
                    SELECT * FROM job_descriptions WHERE owner_id = :owner_id
                    ORDER BY created_at DESC, id DESC
                """),
                {"owner_id": owner_id}
            )
            return [_jd_from_row(row) for row in result.fetchall()]

    def get(self, owner_id: str, jd_id: str) -> dict:
        with get_db_session() as db:
            result = db.execute(
                text("SELECT * FROM job_descriptions WHERE id = :id AND owner_id = :owner_id"),
                {"id": jd_id, "owner_id": owner_id}
            )
            jd = _jd_from_row(result.fetchone())
        if jd is None:
            raise NotFoundError("Job description not found")
        return jd

    def update_content(self, owner_id: str, jd_id: str, content: str) -> dict:
        with get_db_session() as db:
            result = db.execute(
                text("""
                    UPDATE job_descriptions SET content = :content, updated_at = :updated_at
                    WHERE id = :id AND owner_id = :owner_id
                """),
                {"content": content, "updated_at": _now(), "id": jd_id, "owner_id": owner_id}
            )
            if result.rowcount == 0:
                raise NotFoundError("Job description not found")
        return self.get(owner_id, jd_id)

    def delete(self, owner_id: str, jd_id: str) -> None:
        with get_db_session() as db:
            result = db.execute(
                text("DELETE FROM job_descriptions WHERE id = :id AND owner_id = :owner_id"),
                {"id": jd_id, "owner_id": owner_id}
            )
            if result.rowcount == 0:
                raise NotFoundError("Job description not found")

    def count(self, owner_id: str) -> int:
        with get_db_session() as db:
            result = db.execute(
                text("SELECT COUNT(*) FROM job_descriptions WHERE owner_id = :owner_id"),
                {"owner_id": owner_id}
            )
            return int(result.scalar() or 0)


# ============================================================
# QUESTIONNAIRE DRAFTS
# ============================================================

class DraftStore:
    def save(self, owner_id: str, step: int, answers: Dict[str, Any]) -> dict:
        params = {
            "owner_id": owner_id,
            "step": step,
            "answers": json.dumps(answers or {}),
            "updated_at": _now(),
        }
        with get_db_session() as db:
            # One draft per owner: replace whatever is there
            db.execute(text("DELETE FROM jd_drafts WHERE owner_id = :owner_id"), params)
            db.execute(
                text("""
                    INSERT INTO jd_drafts (owner_id, step, answers, updated_at)
                    VALUES (:owner_id, :step, :answers, :updated_at)
                """),
                params
            )
        return {"step": step, "answers": answers or {}, "updated_at": params["updated_at"]}

    def load(self, owner_id: str) -> Optional[dict]:
        with get_db_session() as db:
            result = db.execute(
                text("SELECT step, answers, updated_at FROM jd_drafts WHERE owner_id = :owner_id"),
                {"owner_id": owner_id}
            )
            draft = _row_to_dict(result.fetchone())
        if draft is not None:
            draft["answers"] = json.loads(draft["answers"] or "{}")
        return draft

    def clear(self, owner_id: str) -> bool:
        with get_db_session() as db:
            result = db.execute(
                text("DELETE FROM jd_drafts WHERE owner_id = :owner_id"),
                {"owner_id": owner_id}
            )
            return result.rowcount > 0
