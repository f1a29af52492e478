"""Shared utilities for centerlines"""
