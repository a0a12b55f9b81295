"""Receipt payloads for tickets and trip summaries"""
