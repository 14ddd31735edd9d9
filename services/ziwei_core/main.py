#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FastAPI entrypoint for ziwei-core-service.

该服务只负责紫微斗数排盘的纯计算，不包含解读。
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PROJECT_ROOT = os.path.dirname(BASE_DIR)
sys.path.insert(0, PROJECT_ROOT)

from core.calculators.ziwei_calculator import ZiweiCalculator  # noqa: E402
from core.calculators.ziwei_core import ZiweiInputError, ZiweiTableLookupError  # noqa: E402
from server.config.env_config import is_production  # noqa: E402

from .schemas import ZiweiCoreRequest, ZiweiCoreResponse  # noqa: E402

logger = logging.getLogger(__name__)

SERVICE_NAME = "ziwei-core-service"
SERVICE_VERSION = "1.0.0"

app = FastAPI(
    title="Ziwei Core Service",
    version=SERVICE_VERSION,
    description="提供紫微斗数排盘核心计算能力的微服务。",
)


@app.exception_handler(ZiweiInputError)
async def handle_input_error(request: Request, exc: ZiweiInputError) -> JSONResponse:
    logger.warning(f"参数验证错误: {exc}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": str(exc), "error_type": "validation_error"},
    )


@app.exception_handler(ZiweiTableLookupError)
async def handle_lookup_error(request: Request, exc: ZiweiTableLookupError) -> JSONResponse:
    logger.error(f"排盘查表越界: {exc}", exc_info=exc)
    # 生产环境不暴露详细错误信息
    detail = "服务器内部错误，请稍后重试" if is_production() else f"错误: {exc}"
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": detail, "error_type": "internal_error"},
    )


@app.post("/core/calc-ziwei", response_model=ZiweiCoreResponse)
def calc_ziwei(payload: ZiweiCoreRequest) -> Dict[str, Any]:
    calculator = ZiweiCalculator(
        birth_date=payload.birth_date,
        birth_hour=payload.birth_hour,
        calendar_type=payload.calendar_type,
        gender=payload.gender,
        name=payload.name,
        is_leap_month=payload.is_leap_month,
    )
    data = calculator.calculate_dict()

    return {
        **data,
        "metadata": {
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
        },
    }


@app.get("/healthz", tags=["health"])
def health_check() -> Dict[str, str]:
    return {"status": "ok"}
