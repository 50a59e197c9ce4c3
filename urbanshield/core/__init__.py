"""Core authentication controller: config, api components and utilities"""
