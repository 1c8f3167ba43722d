# controller/api_key_controller.py
from fastapi import APIRouter, status
from fastapi.params import Depends
from controller.controller_dependencies import get_credential_store
from model.api import CredentialStateResponse, SubmitKeyRequest
from model.credential import CredentialState
from service.credential_store import CredentialStore
from util.constants import InternalURIs

api_key_router = APIRouter()


def _to_response(state: CredentialState) -> CredentialStateResponse:
    return CredentialStateResponse(
        status=state.status,
        hasKey=state.has_key,
        reason=state.reason,
        message=state.message,
    )


@api_key_router.get(InternalURIs.API_KEY, response_model=CredentialStateResponse)
async def get_api_key_state(
    store: CredentialStore = Depends(get_credential_store),
) -> CredentialStateResponse:
    return _to_response(store.state)


@api_key_router.post(
    InternalURIs.API_KEY,
    response_model=CredentialStateResponse,
    status_code=status.HTTP_200_OK,
)
async def submit_api_key(
    payload: SubmitKeyRequest,
    store: CredentialStore = Depends(get_credential_store),
) -> CredentialStateResponse:
    return _to_response(await store.submit(payload.apiKey))


@api_key_router.post(InternalURIs.API_KEY_EDIT, response_model=CredentialStateResponse)
async def edit_api_key(
    store: CredentialStore = Depends(get_credential_store),
) -> CredentialStateResponse:
    return _to_response(store.edit())


@api_key_router.delete(InternalURIs.API_KEY, response_model=CredentialStateResponse)
async def remove_api_key(
    store: CredentialStore = Depends(get_credential_store),
) -> CredentialStateResponse:
    return _to_response(await store.remove())
