# invoicing/api/customers.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from invoicing.db.store import CustomerStore
from invoicing.dependencies import get_customer_store
from invoicing.models.customers import CustomerIn, CustomerOut, CustomerUpdate

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=List[CustomerOut])
def list_customers(
    store: CustomerStore = Depends(get_customer_store),
) -> List[CustomerOut]:
    """
    Return all customers in the order they were created.
    """
    return store.list()


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(
    customer_id: int,
    store: CustomerStore = Depends(get_customer_store),
) -> CustomerOut:
    customer = store.get(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.post("", response_model=CustomerOut, status_code=201)
def create_customer(
    payload: CustomerIn,
    store: CustomerStore = Depends(get_customer_store),
) -> CustomerOut:
    return store.create(payload)


@router.put("/{customer_id}", response_model=CustomerOut)
def update_customer(
    customer_id: int,
    payload: CustomerUpdate,
    store: CustomerStore = Depends(get_customer_store),
) -> CustomerOut:
    """
    Change only the fields present in the body.
    """
    customer = store.update(customer_id, payload)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.delete("/{customer_id}", status_code=204, response_class=Response)
def delete_customer(
    customer_id: int,
    store: CustomerStore = Depends(get_customer_store),
) -> Response:
    # Invoices of a deleted customer are kept as they are.
    store.delete(customer_id)
    return Response(status_code=204)
