# -*- coding: utf-8 -*-
"""vaguedenoiser 滤镜的单元测试

运行测试命令:
    pytest tests/unit/test_vaguedenoiser.py -v
"""

import pytest

from fluentfilter.command import FfmpegCommand
from fluentfilter.filters.vaguedenoiser import FILTER_NAME, VaguedenoiserFilter, vaguedenoiser


PARAMS = ["threshold", "method", "nsteps", "percent", "planes"]


@pytest.fixture
def command():
    return vaguedenoiser(FfmpegCommand("input.mp4"))


class FakeCommand:
    """只实现注册和追加能力的最小命令构建器"""

    def __init__(self):
        self.added = []

    @classmethod
    def register_filter(cls, name, factory):
        setattr(cls, name, factory)

    def add_filter(self, spec):
        self.added.append(spec)
        return self


# =================== 注册函数 测试 ===================


class TestRegistration:
    """测试 vaguedenoiser 注册函数"""

    def test_returns_same_host(self):
        """返回传入的同一个对象"""
        command = FfmpegCommand()
        assert vaguedenoiser(command) is command

    def test_returns_same_class(self):
        assert vaguedenoiser(FakeCommand) is FakeCommand

    def test_installs_method(self):
        """注册后实例可调用 vaguedenoiser()"""
        vaguedenoiser(FakeCommand)
        host = FakeCommand()
        flt = host.vaguedenoiser()
        assert isinstance(flt, VaguedenoiserFilter)
        assert flt.command is host

    def test_fresh_filter_each_call(self, command):
        """每次调用返回新的配置对象"""
        first = command.vaguedenoiser()
        second = command.vaguedenoiser()
        assert first is not second

    def test_bound_to_invoking_instance(self, command):
        """配置对象绑定到调用它的实例"""
        other = FfmpegCommand("other.mp4")
        assert other.vaguedenoiser().command is other
        assert command.vaguedenoiser().command is command

    def test_host_without_registration(self):
        """宿主不支持注册时异常直接抛出"""
        with pytest.raises(AttributeError):
            vaguedenoiser(object())

    def test_register_twice(self):
        """重复注册不影响使用"""
        vaguedenoiser(FakeCommand)
        vaguedenoiser(FakeCommand)
        host = FakeCommand()
        assert host.vaguedenoiser().threshold(1).build() is host
        assert len(host.added) == 1


# =================== 配置对象 测试 ===================


class TestSetters:
    """测试 setter 及别名"""

    @pytest.mark.parametrize("name", PARAMS)
    def test_setter_returns_self(self, command, name):
        flt = command.vaguedenoiser()
        assert getattr(flt, name)(3) is flt

    @pytest.mark.parametrize("name", PARAMS)
    def test_alias_same_state(self, command, name):
        """with_ 别名与原 setter 产生相同状态"""
        base = getattr(command.vaguedenoiser(), name)(7)
        alias = getattr(command.vaguedenoiser(), f"with_{name}")(7)
        assert base.options() == alias.options() == {name: 7}

    @pytest.mark.parametrize("name", PARAMS)
    def test_alias_is_same_function(self, name):
        """别名在类上只安装一次，且与原 setter 是同一个函数"""
        assert VaguedenoiserFilter.__dict__[f"with_{name}"] is VaguedenoiserFilter.__dict__[name]

    def test_overwrite(self, command):
        """重复调用覆盖之前的值"""
        flt = command.vaguedenoiser().threshold(1).threshold(5)
        assert flt.options() == {"threshold": 5}

    def test_values_unvalidated(self, command):
        """参数值不做校验，原样透传"""
        flt = command.vaguedenoiser().method("not-a-method").percent(1000)
        assert flt.options() == {"method": "not-a-method", "percent": 1000}


class TestBuild:
    """测试 build 生成的滤镜描述"""

    def test_empty_options(self, command):
        """没有设置参数时 options 为空"""
        result = command.vaguedenoiser().build()
        assert result is command
        assert command.filters == ({"name": "vaguedenoiser", "options": {}},)

    def test_all_options(self, command):
        """设置全部参数"""
        command.vaguedenoiser() \
            .threshold(2) \
            .method(1) \
            .nsteps(6) \
            .percent(85) \
            .planes([0, 1, 2]) \
            .build()

        assert command.filters[-1] == {
            "name": FILTER_NAME,
            "options": {
                "threshold": 2,
                "method": 1,
                "nsteps": 6,
                "percent": 85,
                "planes": [0, 1, 2],
            },
        }

    def test_option_order(self, command):
        """options 的 key 顺序固定，与调用顺序无关"""
        command.vaguedenoiser().planes(1).nsteps(4).threshold(3).build()
        assert list(command.filters[-1]["options"]) == ["threshold", "nsteps", "planes"]

    @pytest.mark.parametrize("name", PARAMS)
    def test_single_option(self, command, name):
        getattr(command.vaguedenoiser(), name)(9).build()
        assert command.filters[-1]["options"] == {name: 9}

    @pytest.mark.parametrize("name", PARAMS)
    @pytest.mark.parametrize("value", [0, "", False, None, []])
    def test_falsy_values_omitted(self, command, name, value):
        """假值会被当作未设置（percent(0) 也不会输出）"""
        getattr(command.vaguedenoiser(), name)(value).build()
        assert command.filters[-1]["options"] == {}

    def test_keep_falsy(self, command):
        """keep_falsy=True 时保留调用过 setter 的假值"""
        command.vaguedenoiser().percent(0).threshold(2).build(keep_falsy=True)
        assert command.filters[-1]["options"] == {"threshold": 2, "percent": 0}

    def test_keep_falsy_skips_unset(self, command):
        command.vaguedenoiser().build(keep_falsy=True)
        assert command.filters[-1]["options"] == {}

    def test_build_appends_each_call(self, command):
        """每次 build 追加一个描述"""
        flt = command.vaguedenoiser().nsteps(6)
        for _ in range(3):
            flt.build()
        assert len(command.filters) == 3
        assert all(spec["options"] == {"nsteps": 6} for spec in command.filters)

    def test_build_through_fake_host(self):
        """build 只依赖宿主的 add_filter"""
        vaguedenoiser(FakeCommand)
        host = FakeCommand()
        assert host.vaguedenoiser().threshold(2).build() is host
        assert host.added == [{"name": "vaguedenoiser", "options": {"threshold": 2}}]

    def test_chain_continues(self, command):
        """build 返回命令，可以继续添加滤镜"""
        result = command.vaguedenoiser().threshold(2).build() \
            .vaguedenoiser().nsteps(4).build()
        assert result is command
        assert command.build() == "vaguedenoiser=threshold=2,vaguedenoiser=nsteps=4"
