"""
Pydantic schemas for health and the API descriptor
"""
from pydantic import BaseModel
from typing import List


class ServicesStatus(BaseModel):
    """Which store bindings are configured"""
    kv: bool
    d1: bool


class HealthResponse(BaseModel):
    """Schema for health check response"""
    status: str = "ok"
    timestamp: str
    services: ServicesStatus


class ApiDescriptor(BaseModel):
    """Schema for the default response listing available endpoints"""
    message: str
    endpoints: List[str]
    note: str
