"""Lightsail tools internal tests"""
