"""Command-line interface for pages-deploy"""
