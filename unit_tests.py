import cProfile, pstats, inspect

from src.test import test_util, test_parsing, test_notes, test_qualities, test_scales, test_chords
from src.test import test_harmony, test_recommendations, test_progressions, test_session, test_display

from src import util

util.log.verbose = False

PROFILE_EACH = False

modules_to_test = [
                  test_util,
                  test_parsing,
                  test_notes,
                  test_qualities,
                  test_scales,
                  test_chords,
                  test_harmony,
                  test_recommendations,
                  test_progressions,
                  test_session,
                  test_display,
                  ]

def module_tests(module):
    """every test function defined in a test module, in definition order.
    tests that take pytest fixtures as arguments can only be run through pytest, so are skipped here"""
    funcs = [f for name, f in inspect.getmembers(module, inspect.isfunction)
             if name.startswith('test_') and f.__module__ == module.__name__]
    funcs = sorted(funcs, key=lambda f: f.__code__.co_firstlineno)
    runnable = [f for f in funcs if len(inspect.signature(f).parameters) == 0]
    skipped = [f.__name__ for f in funcs if f not in runnable]
    return runnable, skipped

def profile(func):
    def wrapper():
        if PROFILE_EACH:
            profiler = cProfile.Profile()
            profiler.enable()
            func()
            profiler.disable()
            stats = pstats.Stats(profiler).sort_stats('cumtime')
            stats.print_stats(6)
        else:
            func()
    return wrapper

def run_all_tests():
    for module in modules_to_test:
        tests, skipped = module_tests(module)

        @profile
        def module_test():
            print(f'Testing {module.__name__}')
            for test in tests:
                test()
            print(f' + {module.__name__} passed {len(tests)} tests + ')
            if len(skipped) > 0:
                print(f'   (skipped fixture-based tests, run these through pytest: {", ".join(skipped)})')

        module_test()
    print(f'+++ All tests passed +++')

if __name__ == '__main__':
    if PROFILE_EACH:
        run_all_tests()
    else:
        # profile them all together:
        profiler = cProfile.Profile()
        profiler.enable()

        run_all_tests()

        profiler.disable()
        stats = pstats.Stats(profiler).sort_stats('tottime')
        print('='*20 + '\nPROFILING:\n' + '='*20)
        stats.print_stats(20)
