"""
Tests for the code generator walk.
"""

from wxjsx.codegen.chain import ChainTag
from wxjsx.codegen.generator import Generator, generate_code
from wxjsx.markup.parser import parse_markup


def gen(markup: str) -> str:
    return generate_code(parse_markup(markup))


class TestComponentNames:

    def test_open_tag_is_camel_cased(self):
        assert gen("<my-icon></my-icon>") == "<MyIcon></MyIcon>"

    def test_self_closing_tag_only_capitalizes_first_letter(self):
        # known asymmetry: hyphens are kept for self-closing tags
        assert gen("<my-icon/>") == "<My-icon/>"

    def test_multi_segment_names(self):
        assert gen("<scroll-view-x></scroll-view-x>") == "<ScrollViewX></ScrollViewX>"


class TestElementCode:

    def test_children_are_concatenated_in_order(self):
        assert gen("<view>a<text>b</text><image/></view>") == "<View>a<Text>b</Text><Image/></View>"

    def test_key_directive(self):
        assert gen('<view wx:key="{{id}}"></view>') == '<View key="id"></View>'

    def test_events_and_plain_attributes(self):
        code = gen("<input bindconfirm=\"{{send}}\" bindlongpress='{{hold}}' value=\"{{v}}\"/>")
        assert code == '<Input onkeydown="send" onlongpress="hold" value="v"/>'

    def test_text_interpolation_and_whitespace(self):
        code = gen("<text>\n  Hi   {{user.name}},\n   welcome\n</text>")
        assert code == "<Text>Hi {user.name}, welcome</Text>"

    def test_stray_close_tag_generates_nothing(self):
        assert gen("</view>") == ""


class TestDirectivesInTree:

    def test_chain_across_siblings(self):
        code = gen(
            '<view><text wx:if="{{a}}">a</text>'
            '<text wx:elseif="{{b}}">b</text>'
            "<text wx:else>c</text></view>"
        )
        assert code == "<View>{a?<Text>a</Text>:b?<Text>b</Text>:true?<Text>c</Text>:null}</View>"

    def test_elseif_without_if_is_plain(self):
        assert gen('<view><text wx:elseif="{{b}}">b</text></view>') == "<View><Text>b</Text></View>"

    def test_loop_with_conditional_on_same_element(self):
        code = gen('<view wx:for="{{rows}}" wx:if="{{item.visible}}">{{item.title}}</view>')
        assert code == "<>{rows.map((item)=>{item.visible?<View>{item.title}</View>:)}</>"

    def test_chain_state_leaks_between_subtrees(self):
        code = gen(
            '<view><view><text wx:if="{{a}}">a</text></view>'
            "<text wx:else/></view>"
        )
        assert code == "<View><View>{a?<Text>a</Text>:</View>true?<Text/>:null}</View>"

    def test_generator_owns_its_chain_state(self):
        generator = Generator(parse_markup('<text wx:if="{{a}}">a</text>'))
        assert generator.generate() == "{a?<Text>a</Text>:"
        assert generator.chain.stack == [ChainTag.IF]

        fresh = Generator(parse_markup('<text wx:elseif="{{b}}">b</text>'))
        assert fresh.generate() == "<Text>b</Text>"
