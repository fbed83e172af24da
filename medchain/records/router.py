"""
Record Router - API endpoints for creating and reading medical records.
"""
from fastapi import APIRouter, Depends, status

from ..core.ledger import Ledger
from ..deps import get_ledger, get_current_address, parse_address
from ..authorization.engine import get_record, get_doctor_accessible_records
from .schemas import RecordCreate, RecordCreateResponse, RecordResponse, RecordIdList
from .service import create_record, get_patient_record_ids

router = APIRouter()

@router.post("", response_model=RecordCreateResponse, status_code=status.HTTP_201_CREATED)
def create_medical_record(
    record_data: RecordCreate,
    caller: str = Depends(get_current_address),
    ledger: Ledger = Depends(get_ledger)
):
    """
    Create a record owned by the calling patient.
    """
    with ledger.transaction() as ctx:
        record_id = create_record(
            ctx,
            caller,
            record_data.payload_reference,
            record_data.record_type,
            record_data.description,
        )
    return RecordCreateResponse(record_id=record_id)

@router.get("/patients/{address}", response_model=RecordIdList)
def list_patient_records(address: str, ledger: Ledger = Depends(get_ledger)):
    """
    List a patient's record ids in creation order.
    """
    address = parse_address(address)
    with ledger.snapshot() as ctx:
        return RecordIdList(record_ids=get_patient_record_ids(ctx, address))

@router.get("/doctors/{address}", response_model=RecordIdList)
def list_doctor_accessible_records(
    address: str,
    caller: str = Depends(get_current_address),
    ledger: Ledger = Depends(get_ledger)
):
    """
    List the records the calling doctor can read through grants.
    
    Emergency mode does not add records to this list.
    """
    address = parse_address(address)
    with ledger.snapshot() as ctx:
        return RecordIdList(record_ids=get_doctor_accessible_records(ctx, caller, address))

@router.get("/{record_id}", response_model=RecordResponse)
def read_record(
    record_id: int,
    caller: str = Depends(get_current_address),
    ledger: Ledger = Depends(get_ledger)
):
    """
    Get a record's metadata if the caller is authorized to read it.
    """
    with ledger.snapshot() as ctx:
        return RecordResponse.model_validate(get_record(ctx, caller, record_id))
