"""
HTML input form served when the challenge endpoint gets no query string.
"""
from fsx_challenge.infrastructure.api_constants import ChallengeDefaults


INPUT_FORM = f"""<!doctype html>
<html>
    <head>
        <title>FSX Challenge Generator</title>
    </head>
    <body>
        <form method="get" action="/">
            <label for="min">
                Min Yardage:
                <input type="text" id="min" name="min">
            </label>
            <label for="max">
                Max Yardage:
                <input type="text" id="max" name="max">
            </label>
            <label for="min_gap">
                Min Gap Yardage:
                <input value="{ChallengeDefaults.MIN_GAP}" type="text" id="min_gap" name="min_gap">
            </label>
            <label for="inner_ring">
                Inner Ring Yardage:
                <input value="{ChallengeDefaults.INNER_RING}" type="text" id="inner_ring" name="inner_ring">
            </label>
            <label for="mid_ring">
                Mid Ring Yardage:
                <input value="{ChallengeDefaults.MID_RING}" type="text" id="mid_ring" name="mid_ring">
            </label>
            <label for="outer_ring">
                Outer Ring Yardage:
                <input value="{ChallengeDefaults.OUTER_RING}" type="text" id="outer_ring" name="outer_ring">
            </label>
            <label for="inner_score">
                Inner Score:
                <input value="{ChallengeDefaults.INNER_SCORE}" type="text" id="inner_score" name="inner_score">
            </label>
            <label for="mid_score">
                Mid Score:
                <input value="{ChallengeDefaults.MID_SCORE}" type="text" id="mid_score" name="mid_score">
            </label>
            <label for="outer_score">
                Outer Score:
                <input value="{ChallengeDefaults.OUTER_SCORE}" type="text" id="outer_score" name="outer_score">
            </label>
            <input type="submit">
        </form>
    </body>
</html>
"""
