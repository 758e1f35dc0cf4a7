"""Discovery 도메인 (빠른 추천, 브리프, AI 설명, 진행 인사이트)"""
