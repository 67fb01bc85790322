"""Lifecycle commands: dev, fix, generate and new."""