#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Client helper for calling the ziwei-core-service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

import httpx

from server.config.env_config import ZIWEI_CORE_SERVICE_URL, get_env_config

logger = logging.getLogger(__name__)


class ZiweiCoreClient:
    """Lightweight HTTP client for the ziwei-core-service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or get_env_config().get_config(ZIWEI_CORE_SERVICE_URL, "")).rstrip("/")
        if not self.base_url:
            raise RuntimeError(f"{ZIWEI_CORE_SERVICE_URL} is not configured")
        self.timeout = timeout
        self._transport = transport

    def calculate_ziwei(
        self,
        birth_date: str,
        birth_hour: Union[int, str],
        calendar_type: str = "solar",
        gender: str = "male",
        name: str = "",
        is_leap_month: bool = False,
    ) -> Dict[str, Any]:
        payload = {
            "name": name,
            "gender": gender,
            "calendar_type": calendar_type,
            "birth_date": birth_date,
            "birth_hour": birth_hour,
            "is_leap_month": is_leap_month,
        }

        url = f"{self.base_url}/core/calc-ziwei"
        logger.debug("Calling ziwei-core-service: %s payload=%s", url, payload)

        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            response = client.post(url, json=payload)
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                logger.error("ziwei-core-service returned %s: %s", exc.response.status_code, exc.response.text)
                raise

            data: Dict[str, Any] = response.json()
            # Remove metadata helper field to match ZiweiResult.to_dict()
            data.pop("metadata", None)
            return data

    def health_check(self) -> bool:
        url = f"{self.base_url}/healthz"
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(url)
                response.raise_for_status()
                return True
        except httpx.HTTPError:
            logger.exception("ziwei-core-service health check failed")
            return False
