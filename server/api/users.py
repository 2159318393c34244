# server/api/users.py

import logging
from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.engine import Connection
from database import get_db


logger = logging.getLogger(__name__)

router = APIRouter()


def build_user_query(user_id: str) -> str:
    # INTENTIONALLY INSECURE: raw value goes straight into the statement
    return f"SELECT id, username FROM users WHERE id = {user_id};"


@router.get("/user")
def get_user(id: str | None = None, db: Connection = Depends(get_db)):
    """
    Looks up users by id and returns [{id, username}, ...].
    Any query or encoding failure is reported as a bare 500 "DB error".
    """
    sql = build_user_query(id or "1")
    try:
        rows = db.exec_driver_sql(sql).fetchall()
        return JSONResponse(jsonable_encoder(
            [{"id": row[0], "username": row[1]} for row in rows]
        ))
    except Exception as e:
        logger.warning("User query failed: %s", e)
        return PlainTextResponse("DB error", status_code=500)
