"""Tests for selector classification."""

import asyncio
import pytest

from ..core.classifier import Verdict, classify, is_pure_pseudo
from ..core.modes import NestingMode
from ..utils.error import RenderUnavailableError
from .conftest import FakeRenderEnvironment

def run_classify(selector, render, mode=NestingMode.NORMAL, height=900):
    return asyncio.run(classify(selector, mode, height, render))

class TestPurePseudo:
    """Tests for pure pseudo detection."""

    @pytest.mark.parametrize('selector', ['::-moz-placeholder', ' ::selection ', ':root', '::-webkit-scrollbar'])
    def test_pure(self, selector):
        assert is_pure_pseudo(selector)

    @pytest.mark.parametrize('selector', ['a::before', 'input::-moz-placeholder', '.x:focus', '*::-webkit-x'])
    def test_not_pure(self, selector):
        assert not is_pure_pseudo(selector)

class TestClassify:
    """Tests for classify."""

    def test_above_fold_kept(self):
        render = FakeRenderEnvironment({'.a': [10]})
        assert run_classify(' .a ', render) == Verdict(kept=True)
        assert render.queries == ['.a']

    def test_no_match_dropped(self):
        render = FakeRenderEnvironment()
        assert run_classify('.missing', render) == Verdict(kept=False)

    def test_below_fold_dropped(self):
        render = FakeRenderEnvironment({'.a': [900, 1500]})
        assert run_classify('.a', render) == Verdict(kept=False)

    def test_fold_is_exclusive(self):
        render = FakeRenderEnvironment({'.a': [899.5]})
        assert run_classify('.a', render).kept

    def test_negative_offset_kept(self):
        render = FakeRenderEnvironment({'.a': [-40]})
        assert run_classify('.a', render).kept

    def test_keyframes_force_remove_skips_query(self):
        render = FakeRenderEnvironment({'from': [0]})
        verdict = run_classify('from', render, mode=NestingMode.KEYFRAMES_FORCE_REMOVE)
        assert verdict == Verdict(kept=False)
        assert render.queries == []

    def test_media_mode_tests_normally(self):
        render = FakeRenderEnvironment({'.x': [0]})
        assert run_classify('.x', render, mode=NestingMode.MEDIA).kept

    def test_pure_pseudo_kept_without_query(self):
        render = FakeRenderEnvironment()
        verdict = run_classify('::-moz-placeholder', render)
        assert verdict == Verdict(kept=True, pure=True)
        assert render.queries == []

    @pytest.mark.parametrize('selector, queried', [
        ('a:hover', 'a'),
        ('.btn::before', '.btn'),
        ('.btn:after', '.btn'),
        ('button::-moz-focus-inner', 'button'),
        ('input[type=number]::-webkit-inner-spin-button', 'input[type=number]'),
        ('.nav a:hover::after', '.nav a'),
    ])
    def test_pseudo_stripped_for_query(self, selector, queried):
        render = FakeRenderEnvironment({queried: [0]})
        assert run_classify(selector, render) == Verdict(kept=True)
        assert render.queries == [queried]

    def test_other_pseudo_classes_queried_as_is(self):
        render = FakeRenderEnvironment({'a': [0]})
        assert not run_classify('a:focus', render).kept
        assert render.queries == ['a:focus']

    def test_invalid_selector_dropped(self):
        render = FakeRenderEnvironment(invalid={'a['})
        assert run_classify('a[', render) == Verdict(kept=False, invalid=True)

    def test_render_unavailable_propagates(self):
        render = FakeRenderEnvironment(unavailable=True)
        with pytest.raises(RenderUnavailableError):
            run_classify('.a', render)

    def test_clear_style_restored_on_every_measured_element(self):
        render = FakeRenderEnvironment({'.a': [2000, 10, 20]})
        assert run_classify('.a', render).kept
        first, second, third = render.elements['.a']
        assert first.clear_calls == ['none', '']
        assert second.clear_calls == ['none', '']
        # one element above the fold is enough
        assert not third.measured
        assert third.clear_calls == []

    def test_clear_style_restored_when_dropped(self):
        render = FakeRenderEnvironment({'.a': [2000, 3000]})
        assert not run_classify('.a', render).kept
        for element in render.elements['.a']:
            assert element.clear_calls == ['none', '']
