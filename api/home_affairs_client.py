"""
Home Affairs API client
Citizen lookup for South African ID numbers

ID numbers are validated locally before any request is made, so a
malformed or checksum-invalid number never reaches the service.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any

import requests

from core.config import config
from utils.logger import mask_id_number
from validators import validate, describe, birth_date_string

logger = logging.getLogger(__name__)


SERVICE_NAME = "home-affairs"

# Verification types supported by the Home Affairs API
VERIFICATION_TYPES = {
    "ID_VERIFICATION": "id_verification",
    "MARRIAGE_STATUS": "marriage_status",
    "DECEASED_STATUS": "deceased_status",
    "ADDRESS_VERIFICATION": "address_verification",
    "PHOTO_VERIFICATION": "photo_verification",
}


class HomeAffairsClient:
    """Home Affairs API client"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        allow_demo_fallback: Optional[bool] = None
    ):
        """
        Initialize the client

        Args:
            base_url: service root, defaults to HOME_AFFAIRS_API_URL
            timeout: request timeout in seconds, defaults to HOME_AFFAIRS_TIMEOUT
            allow_demo_fallback: answer with data decoded from the ID number
                when the service cannot be reached (testing only)
        """
        self.base_url = (base_url or config.HOME_AFFAIRS_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.HOME_AFFAIRS_TIMEOUT
        if allow_demo_fallback is None:
            allow_demo_fallback = config.HOME_AFFAIRS_DEMO_FALLBACK
        self.allow_demo_fallback = allow_demo_fallback

    def _citizen_url(self, id_number: str, suffix: str = "") -> str:
        return f"{self.base_url}/home-affairs/citizens/{id_number}{suffix}"

    @staticmethod
    def _failure(error: str, code: str) -> Dict[str, Any]:
        return {
            "success": False,
            "error": error,
            "code": code,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": SERVICE_NAME,
        }

    def _get(self, url: str) -> requests.Response:
        return requests.get(
            url,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=self.timeout,
        )

    def verify_id(self, id_number: str) -> Dict[str, Any]:
        """
        Verify an ID number with Home Affairs

        Args:
            id_number: ID number, separators allowed

        Returns:
            {"success": True, "citizen": {...}} on success, otherwise
            {"success": False, "error": str, "code": str,
             "timestamp": str, "service": "home-affairs"}
        """
        result = validate(id_number)
        if not result.is_valid:
            logger.warning(
                f"Rejected ID number before lookup ({result.error.value}): "
                f"{mask_id_number(result.id_number)}"
            )
            return self._failure(result.message, "INVALID_ID_NUMBER")

        cleaned = result.id_number
        url = self._citizen_url(cleaned)
        logger.info(f"Verifying ID number with Home Affairs: {mask_id_number(cleaned)}")

        try:
            response = self._get(url)
        except requests.exceptions.Timeout:
            logger.error("Home Affairs request timed out")
            return self._failure("Home Affairs API request timed out", "TIMEOUT_ERROR")
        except requests.exceptions.SSLError as e:
            logger.error(f"Home Affairs TLS error: {str(e)}")
            return self._failure("Failed to connect to Home Affairs API", "CONNECTION_ERROR")
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Home Affairs connection error: {str(e)}")
            if self.allow_demo_fallback:
                logger.warning("Home Affairs unavailable, using demo data")
                return self._demo_data(cleaned, result.fields)
            return self._failure("Failed to connect to Home Affairs API", "CONNECTION_ERROR")
        except requests.exceptions.RequestException as e:
            # MissingSchema, InvalidURL, TooManyRedirects: no demo data
            logger.error(f"Home Affairs request error: {str(e)}")
            return self._failure("Failed to connect to Home Affairs API", "CONNECTION_ERROR")

        if not response.text:
            logger.error("Home Affairs returned an empty response")
            return self._failure("Empty response from Home Affairs API", "EMPTY_RESPONSE")

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError):
            logger.error("Home Affairs returned invalid JSON")
            return self._failure("Invalid JSON response from Home Affairs API", "INVALID_JSON")

        if not response.ok:
            error = data.get("error") if isinstance(data, dict) else None
            code = data.get("code") if isinstance(data, dict) else None
            logger.error(f"Home Affairs error ({response.status_code}): {error or response.reason}")
            return self._failure(
                error or "Failed to verify with Home Affairs",
                code or "VERIFICATION_FAILED",
            )

        if not isinstance(data, dict) or not data.get("citizen"):
            logger.error("Home Affairs response is missing citizen data")
            return self._failure(
                "Invalid response structure from Home Affairs API",
                "INVALID_RESPONSE_STRUCTURE",
            )

        logger.info(f"ID verification successful: {mask_id_number(cleaned)}")
        return {
            "success": True,
            "citizen": data["citizen"],
        }

    def _demo_data(self, id_number: str, fields) -> Dict[str, Any]:
        """Citizen record decoded from the ID number itself"""
        info = describe(id_number, fields)
        citizen = {
            "firstName": "Demo",
            "lastName": "User",
            "dateOfBirth": info.date_of_birth or birth_date_string(fields),
            "gender": info.gender.value,
            "idNumber": id_number,
            "nationality": "South African",
        }
        return {
            "success": True,
            "citizen": citizen,
            "fallback_used": True,
            "message": "Demo data used for testing",
        }

    def get_marriage_status(self, id_number: str) -> Dict[str, Any]:
        """
        Marriage status for an ID number

        Returns:
            the service's JSON body on success, otherwise a failure dict
        """
        result = validate(id_number)
        if not result.is_valid:
            return self._failure(result.message, "INVALID_ID_NUMBER")

        url = self._citizen_url(result.id_number, "/marriage-status")

        try:
            response = self._get(url)
        except requests.exceptions.Timeout:
            logger.error("Marriage status request timed out")
            return self._failure("Home Affairs API request timed out", "TIMEOUT_ERROR")
        except requests.exceptions.RequestException as e:
            logger.error(f"Marriage status error: {str(e)}")
            return self._failure("Failed to get marriage status", "API_ERROR")

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError):
            logger.error("Marriage status response parsing failed")
            return self._failure("Invalid JSON response from Home Affairs API", "INVALID_JSON")

        if not response.ok:
            error = data.get("error") if isinstance(data, dict) else None
            return self._failure(error or "Failed to get marriage status", "VERIFICATION_FAILED")

        return data


class HomeAffairsApiError(Exception):
    """Home Affairs API error"""

    def __init__(self, code: str, message: str, response: dict = None):
        self.code = code
        self.message = message
        self.response = response or {}
        super().__init__(f"[{code}] {message}")


def raise_for_result(result: Dict[str, Any]) -> Dict[str, Any]:
    """Return a successful result unchanged, raise HomeAffairsApiError otherwise"""
    if result.get("success"):
        return result
    raise HomeAffairsApiError(
        result.get("code", "UNKNOWN_ERROR"),
        result.get("error", "Home Affairs request failed"),
        result,
    )
