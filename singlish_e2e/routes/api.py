from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from ..config.settings import Config
from ..data.test_cases import select_cases
from ..services.test_service import TestService

router = APIRouter()

# In-memory storage for the last run report
last_results = None

def get_test_service():
    return TestService(Config)

@router.post('/run-test')
def run_test(
    url: Optional[str] = None,
    roles: Optional[List[str]] = Query(None, description="Roles to run: positive, negative, ui"),
    ids: Optional[List[str]] = Query(None, description="Test case ids to run"),
    service: TestService = Depends(get_test_service)
):
    global last_results
    try:
        cases = select_cases(roles, ids)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not cases:
        raise HTTPException(status_code=404, detail="No test cases match the given filters.")
    try:
        last_results = service.run_and_report(url, roles=roles, ids=ids)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"status": "success", "exit_code": last_results['exit_code'], "summary": last_results.get('summary', {}), "report": last_results}

@router.get('/results')
def get_results():
    if last_results is None:
        raise HTTPException(status_code=404, detail="No results available. Run a test first.")
    return last_results

@router.get('/cases')
def get_cases(roles: Optional[List[str]] = Query(None)):
    try:
        return [case.to_dict() for case in select_cases(roles)]
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

@router.get('/status')
def status():
    return {"status": "ok"}
