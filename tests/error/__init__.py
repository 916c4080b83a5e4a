"""Tests for graphql_defaults.error"""
