import time
import inspect

VERBOSE = False

global_init_time = time.time()

class Log:
    """logging class for detailed info from nested function execution"""
    def __init__(self, verbose=VERBOSE):
        self.verbose=verbose

    def __call__(self, msg):
        if self.verbose:
            cur_frame = inspect.currentframe()
            call_frame = inspect.getouterframes(cur_frame, 2)
            wall_time = time.time() - global_init_time

            context = f'[{wall_time:.06f}]({call_frame[1][3]}) '
            print(context + msg)

log = Log()


class MusicError(Exception):
    """base class for errors that arise from musically invalid input,
    such as a note, mode or chord type that does not exist"""
    pass


# generically useful functions used across modules:
def rotate_list(lst, num_steps, N=None):
    """Accepts a list, and returns the wrapped-around list
    that begins num_steps up from the beginning of the original.
    used for inversions, i.e. the 2nd inversion of [0,1,2] is [1,2,0]"""
    if N is None:
        N = len(lst)
    rotated_idxs = [(num_steps + i) % N for i in range(N)]
    rotated_lst = [lst[i] for i in rotated_idxs]
    return rotated_lst

def unpack_and_reverse_dict(dct, include_keys=False, force_list=False):
    """accepts a dict whose values are iterables, the items of which are all unique,
    and returns the reversed dict that maps each item to its corresponding parent key"""
    rev_dct = {}
    for k, v_list in dct.items():
        if not isinstance(v_list, (tuple, list, set, frozenset)):
            # we expected the value to be an iterable, but it isn't one
            if force_list:
                # set it to be one anyway:
                v_list = [v_list]
            else:
                raise TypeError(f"unpack_and_reverse_dict expects dict values to be tuples or lists, but got: {type(v_list)}")

        for v_item in v_list:
            rev_dct[v_item] = k
        if include_keys:
            # map original dict key back into itself, e.g. for aliases
            rev_dct[k] = k
    return rev_dct

def unpack_and_collect_dict(dct):
    """as unpack_and_reverse_dict, but for dicts whose values are NOT mutually unique.
    returns a dict that maps each item to the list of every parent key it appears under,
    in the order those keys occur in the original dict"""
    rev_dct = {}
    for k, v_list in dct.items():
        for v_item in v_list:
            if v_item not in rev_dct:
                rev_dct[v_item] = []
            rev_dct[v_item].append(k)
    return rev_dct

def clamp(value, lower=0.0, upper=1.0):
    """restricts a numeric value to lie within [lower, upper]"""
    return max(lower, min(value, upper))
