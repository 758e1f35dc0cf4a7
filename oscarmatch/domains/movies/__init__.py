"""Movies 도메인 (Best Picture 카탈로그)"""
