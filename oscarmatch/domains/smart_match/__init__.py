"""Smart Match 도메인 (선호도 기반 점수 계산 + 추천 이유 캐시)"""
