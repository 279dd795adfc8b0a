"""
gridstate Reducer Test Suite

Test Files:
1. test_reducer_initialize.py - initialize / loaded data
2. test_reducer_paging.py - page size and page number
3. test_reducer_sort_filter.py - sort normalization, filter replacement
4. test_reducer_toggles.py - settings and column visibility
5. test_reducer_update_state.py - host prop merge
6. test_reducer_dispatch.py - dispatch table, replay, purity
"""
