from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health_check():
    """Liveness check"""
    return {"status": "ok"}
