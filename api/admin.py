from fastapi import APIRouter, HTTPException
from typing import Optional
from repositories.admin_repo import AdminRepository
from schemas.requests import AdminLoginRequest
from schemas.responses import LoginResponse
from utils.security import create_access_token, verify_password
from utils.validators import has_required
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/admin/login", response_model=LoginResponse)
async def admin_login(request: Optional[AdminLoginRequest] = None):
    """
    Check admin credentials and issue a signed token.

    The token is not checked by any other endpoint.
    """
    request = request or AdminLoginRequest()
    if not has_required(request.email, request.password):
        raise HTTPException(status_code=400, detail="Missing email or password")

    try:
        admin = await AdminRepository.get_by_email(request.email)
        if not admin:
            raise HTTPException(status_code=404, detail="Admin not found")

        if not verify_password(request.password, admin['password']):
            logger.info(f"Failed login for admin {admin['id']}")
            raise HTTPException(status_code=401, detail="Invalid password")

        token = create_access_token(admin['id'], admin['email'])
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error during admin login: {e}")
        raise HTTPException(status_code=500, detail="Login failed")

    return LoginResponse(success=True, message="Login successful", token=token)
