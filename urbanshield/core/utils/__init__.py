"""Shared utilities: exceptions, result types and audit logging"""
