from database import Database
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)


class AdminRepository:

    @staticmethod
    async def get_by_email(email: str) -> Optional[Dict[str, Any]]:
        """Get admin row (id, email, password) by email"""
        return await Database.fetch_one("SELECT * FROM admin WHERE email = ?", (email,))

    @staticmethod
    async def upsert(email: str, password_hash: str) -> int:
        """
        Create admin or reset its password, return admin id.
        Used by create_admin.py only; the HTTP API never writes admins.
        """
        existing = await AdminRepository.get_by_email(email)
        if existing:
            await Database.execute(
                "UPDATE admin SET password = ? WHERE id = ?",
                (password_hash, existing['id'])
            )
            logger.info(f"Reset password for admin {existing['id']}")
            return existing['id']

        admin_id = await Database.insert(
            "INSERT INTO admin (email, password) VALUES (?, ?)",
            (email, password_hash)
        )
        logger.info(f"Created admin {admin_id}")
        return admin_id
