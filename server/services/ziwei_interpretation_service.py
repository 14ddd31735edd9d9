#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微命盘解读服务客户端

职责：
- 把已排好的命盘整理成 prompt，POST 给解读网关（ZIWEI_INTERPRETATION_URL）
- 校验返回的结构化解读（AnalysisInterpretation）
- 网络错误与 5xx 有限次重试；调用方可随时取消协程

网关约定：请求体为 JSON
  {model?, system_instruction, contents, response_mime_type, response_schema}
由网关转发给具体的大模型厂商；返回 AnalysisInterpretation 结构的 JSON，
或把该 JSON 字符串放在 text 字段里。model 未配置时不发送，由网关选默认模型。

排盘本身不依赖此服务，必须在调用前完成。
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from server.config.env_config import (
    ZIWEI_INTERPRETATION_API_KEY,
    ZIWEI_INTERPRETATION_MAX_RETRIES,
    ZIWEI_INTERPRETATION_MODEL,
    ZIWEI_INTERPRETATION_TIMEOUT,
    ZIWEI_INTERPRETATION_URL,
    get_env_config,
)
from server.models.ziwei_interpretation import AnalysisInterpretation
from server.utils.prompt_builders import ZIWEI_SYSTEM_INSTRUCTION, build_ziwei_interpretation_prompt

logger = logging.getLogger(__name__)


class InterpretationError(RuntimeError):
    """解读服务调用失败或返回内容无法解析"""


class ZiweiInterpretationService:
    """紫微解读服务（异步）"""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff_seconds: float = 1.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        config = get_env_config()
        self.endpoint = (endpoint or config.get_config(ZIWEI_INTERPRETATION_URL, "")).rstrip("/")
        self.api_key = api_key or config.get_config(ZIWEI_INTERPRETATION_API_KEY)
        self.model = model or config.get_config(ZIWEI_INTERPRETATION_MODEL)
        self.timeout = timeout if timeout is not None else config.get_float_config(ZIWEI_INTERPRETATION_TIMEOUT, 60.0)
        self.max_retries = (
            max_retries if max_retries is not None
            else config.get_int_config(ZIWEI_INTERPRETATION_MAX_RETRIES, 2)
        )
        self.backoff_seconds = backoff_seconds
        self._transport = transport

        if not self.endpoint:
            raise ValueError(f"{ZIWEI_INTERPRETATION_URL} is not configured")
        if not self.api_key:
            raise ValueError(f"{ZIWEI_INTERPRETATION_API_KEY} is not configured")

    def build_payload(self, profile: Dict[str, Any], chart: Dict[str, Any]) -> Dict[str, Any]:
        payload = {
            "system_instruction": ZIWEI_SYSTEM_INSTRUCTION,
            "contents": build_ziwei_interpretation_prompt(profile, chart),
            "response_mime_type": "application/json",
            "response_schema": AnalysisInterpretation.model_json_schema(),
        }
        if self.model:
            payload["model"] = self.model
        return payload

    async def interpret(
        self,
        profile: Dict[str, Any],
        chart: Dict[str, Any],
        trace_id: Optional[str] = None,
    ) -> AnalysisInterpretation:
        """
        生成命盘解读

        Args:
            profile: Profile.to_dict()
            chart: Chart.to_dict()
            trace_id: 请求追踪ID（可选，用于日志关联）

        Raises:
            InterpretationError: 重试耗尽，或返回内容不是合法的解读结构
        """
        payload = self.build_payload(profile, chart)
        headers = {"Authorization": f"Bearer {self.api_key}"}
        attempts = self.max_retries + 1
        last_error: Optional[Exception] = None

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for attempt in range(1, attempts + 1):
                try:
                    response = await client.post(self.endpoint, json=payload, headers=headers)
                except httpx.TransportError as exc:
                    last_error = exc
                    logger.warning(f"[{trace_id or 'N/A'}] 解读服务连接失败 ({attempt}/{attempts}): {exc}")
                else:
                    if response.status_code < 500:
                        return self._parse_response(response, trace_id)
                    last_error = InterpretationError(f"解读服务返回 {response.status_code}")
                    logger.warning(f"[{trace_id or 'N/A'}] 解读服务返回 {response.status_code} ({attempt}/{attempts})")

                if attempt < attempts:
                    await asyncio.sleep(self.backoff_seconds * attempt)

        raise InterpretationError(f"解读服务调用失败，已重试 {self.max_retries} 次") from last_error

    def _parse_response(self, response: httpx.Response, trace_id: Optional[str]) -> AnalysisInterpretation:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(f"[{trace_id or 'N/A'}] 解读服务返回 {exc.response.status_code}: {exc.response.text}")
            raise InterpretationError(f"解读服务拒绝请求: {exc.response.status_code}") from exc

        try:
            data = response.json()
            # 兼容把 JSON 包在 text 字段里的返回
            if isinstance(data, dict) and isinstance(data.get("text"), str):
                data = json.loads(data["text"])
            return AnalysisInterpretation.model_validate(data)
        except (ValueError, ValidationError) as exc:
            raise InterpretationError(f"解读结果格式不正确: {exc}") from exc
