from fastapi import APIRouter, Request

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/health", name="system.health")
async def health(request: Request):
    database = request.app.state.database
    await database.connect()
    return {"ok": True, "database": database.state.value}
