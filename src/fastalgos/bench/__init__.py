"""
Benchmark harness: `measure.time_sort_call` times one algorithm on one input;
`runner.run_experiment` drives a whole YAML-configured sweep.
"""
