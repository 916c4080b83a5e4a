"""Tests for graphql_defaults.validation"""
