from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def health():
    """Liveness only; storage reachability is reported by the startup diagnostic."""
    return {"status": "ok"}
