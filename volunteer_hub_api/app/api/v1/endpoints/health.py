"""
Health endpoint for API v1.

Reports that the service is up together with the number of records in
each collection.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from volunteer_hub_api.app.api.deps import get_store
from volunteer_hub_api.app.stores.record_store import RecordStore

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health_check(store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    return {"status": "ok", "collections": store.counts()}
