"""
FastAPI application for the care call manager.

Provides REST API endpoints for:
- Uploading the monthly roster CSV
- Managing staff members and the selected month
- Processing and swapping assignments
- Retrieving the printable contact list
"""

import logging
from typing import List, Dict, Any, Optional
from fastapi import FastAPI, HTTPException, UploadFile, File
from pydantic import BaseModel

from ..config import MONTHS, load_config
from ..roster.fields import display_name
from ..roster.loader import RosterError
from ..staff_assignment.manager import CareCallAssignmentManager
from ..staff_assignment.printing import contact_row

logger = logging.getLogger(__name__)


# Pydantic models for API
class StaffCreate(BaseModel):
    name: str


class MonthSelect(BaseModel):
    month: str


class SwapRequest(BaseModel):
    source_staff: str
    record_index: int
    target_staff: str


class StaffListResponse(BaseModel):
    staff_names: List[str]


class AssignmentsResponse(BaseModel):
    month: str
    assignments: Dict[str, List[Dict[str, Any]]]
    staff_counts: Dict[str, int]


class PrintListResponse(BaseModel):
    text: str
    lines: int


class HealthResponse(BaseModel):
    status: str
    version: str
    roster_loaded: bool
    is_processed: bool


# Initialize FastAPI app
app = FastAPI(
    title="Care Call Manager API",
    description="API for distributing monthly care calls across staff",
    version="0.1.0"
)


def new_session() -> CareCallAssignmentManager:
    """Create a session from the current configuration."""
    config = load_config()
    return CareCallAssignmentManager(
        staff_names=config.staff_names,
        month=config.default_month,
        excluded_names=config.excluded_names
    )


# Global state (single user session, nothing is persisted)
session: Optional[CareCallAssignmentManager] = None


def get_session() -> CareCallAssignmentManager:
    global session
    if session is None:
        session = new_session()
    return session


def _assignments_payload(manager: CareCallAssignmentManager) -> AssignmentsResponse:
    assignments = {}
    for staff, records in manager.assignments.items():
        rows = []
        for index, record in enumerate(records):
            row = contact_row(staff, record)
            row['name'] = display_name(record)
            row['index'] = index
            row['swap_targets'] = manager.swap_targets(staff)
            rows.append(row)
        assignments[staff] = rows
    return AssignmentsResponse(
        month=manager.month,
        assignments=assignments,
        staff_counts=manager.staff_counts()
    )


@app.get("/", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    manager = get_session()
    return HealthResponse(
        status="healthy",
        version="0.1.0",
        roster_loaded=bool(manager.roster),
        is_processed=manager.is_processed
    )


@app.post("/roster/upload")
async def upload_roster(file: UploadFile = File(...)):
    """
    Load the monthly roster from a CSV file.

    Any column layout is accepted; names, phones, emails and dates are
    located by header name.
    """
    manager = get_session()

    if not file.filename or not file.filename.lower().endswith('.csv'):
        raise HTTPException(status_code=400, detail="Please select a CSV file (.csv extension required)")

    content = await file.read()
    try:
        count = manager.load_roster(content, filename=file.filename)
    except RosterError as e:
        logger.warning("Rejected roster upload %s: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "status": "success",
        "message": f"Successfully loaded {count} records from CSV file.",
        "records": count,
        "columns": manager.roster_columns
    }


@app.get("/staff", response_model=StaffListResponse)
async def list_staff():
    """List staff members in their configured order."""
    return StaffListResponse(staff_names=get_session().staff_list)


@app.post("/staff", response_model=StaffListResponse)
async def add_staff(request: StaffCreate):
    """Add a staff member."""
    manager = get_session()
    if not manager.add_staff(request.name):
        raise HTTPException(status_code=400, detail=f"Staff name is blank or already present: {request.name!r}")
    return StaffListResponse(staff_names=manager.staff_list)


@app.delete("/staff/{index}", response_model=StaffListResponse)
async def remove_staff(index: int):
    """Remove the staff member at a position in the list."""
    manager = get_session()
    try:
        manager.remove_staff(index)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return StaffListResponse(staff_names=manager.staff_list)


@app.get("/months")
async def list_months():
    """Month names accepted by PUT /month."""
    return {"months": list(MONTHS), "selected": get_session().month}


@app.put("/month")
async def select_month(request: MonthSelect):
    """Select the month used for the next distribution."""
    manager = get_session()
    try:
        manager.set_month(request.month)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"status": "success", "month": manager.month}


@app.post("/assignments/process", response_model=AssignmentsResponse)
async def process_assignments():
    """
    Distribute the roster across staff for the selected month.
    """
    manager = get_session()
    try:
        manager.process_assignments()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _assignments_payload(manager)


@app.get("/assignments", response_model=AssignmentsResponse)
async def get_assignments():
    """
    Get the current assignments with resolved contact columns.
    """
    manager = get_session()
    if not manager.is_processed:
        raise HTTPException(status_code=400, detail="Please process assignments first.")
    return _assignments_payload(manager)


@app.get("/assignments/counts")
async def get_staff_counts():
    """Records per staff member."""
    return get_session().staff_counts()


@app.post("/assignments/swap", response_model=AssignmentsResponse)
async def swap_assignment(request: SwapRequest):
    """
    Move a record to another staff member, taking the nearest record back.
    """
    manager = get_session()
    try:
        manager.swap(request.source_staff, request.record_index, request.target_staff)
    except (ValueError, IndexError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _assignments_payload(manager)


@app.get("/assignments/print-list", response_model=PrintListResponse)
async def get_print_list():
    """
    Generate the comma-separated contact list for copying.
    """
    manager = get_session()
    try:
        text = manager.generate_print_list()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PrintListResponse(text=text, lines=len(text.splitlines()))


if __name__ == "__main__":
    import uvicorn
    config = load_config()
    uvicorn.run(app, host=config.host, port=config.port)
