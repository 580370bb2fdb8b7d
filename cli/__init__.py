'''fwalk 명령줄 패키지(KR). fwalk command-line package (EN).'''
