"""
Transit Segment

지하철 여정의 구간별 선로 거리, 직선 거리, 예상 소요시간 계산
"""
