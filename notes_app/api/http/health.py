from datetime import datetime

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Проверка работоспособности сервиса"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}
