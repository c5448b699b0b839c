"""Response bodies served by the API, one model per endpoint shape."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class WelcomeResponse(BaseModel):
    message: str
    timestamp: str
    hostname: str
    environment: str
    version: str


class HealthChecks(BaseModel):
    server: Literal["ok"] = "ok"
    memory: Literal["ok", "warning"]


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    uptime: int = Field(ge=0)
    timestamp: str
    checks: HealthChecks


class VersionResponse(BaseModel):
    version: str
    environment: str
    runtimeVersion: str
    platform: str
    hostname: str


class ApplicationInfo(BaseModel):
    name: str
    version: str
    environment: str


class SystemInfo(BaseModel):
    hostname: str
    platform: str
    architecture: str
    cpus: int
    totalMemory: str
    freeMemory: str


class MemoryUsage(BaseModel):
    heapUsed: str
    heapTotal: str


class ProcessInfo(BaseModel):
    runtimeVersion: str
    pid: int
    uptime: str
    memoryUsage: MemoryUsage


class InfoResponse(BaseModel):
    application: ApplicationInfo
    system: SystemInfo
    process: ProcessInfo


class StatusResponse(BaseModel):
    status: str


class NotFoundResponse(BaseModel):
    error: str = "Not Found"
    path: str
    message: str = "The requested endpoint does not exist"


class ErrorResponse(BaseModel):
    error: str
    message: str
