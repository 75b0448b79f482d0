from __future__ import annotations

import time

def run_and_measure(name: str, f, *args, **kwargs):
    starttime = time.perf_counter_ns()
    result = f(*args, **kwargs)
    endtime = time.perf_counter_ns()
    print(f"{' '*(24-len(name))}{name}   {round((endtime-starttime)/1000000, 5)}")
    return result
