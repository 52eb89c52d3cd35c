"""Minimal HTTP request parsing, responses, request handlers and routing."""