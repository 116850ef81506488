import re
from xml.dom import Node

CARD_NUMBER_REGEX = re.compile(r'<((?:\w+:)?CCNumber)>([\d \-]+)</\1>')
CVN_REGEX = re.compile(r'<((?:\w+:)?cvn)>[^<]*</\1>')
PASSWORD_REGEX = re.compile(r'<((?:\w+:)?Password)>.*?</\1>', re.DOTALL)


def create_element(doc, parent, tag, value=None, namespace=None):
    """
    Creates an XML element, optionally within a namespace.  The tag should
    then carry its prefix, eg 'man:Username'.
    """
    if namespace:
        ele = doc.createElementNS(namespace, tag)
    else:
        ele = doc.createElement(tag)
    parent.appendChild(ele)
    if value is not None and value != '':
        text = doc.createTextNode(u"%s" % value)
        ele.appendChild(text)
    return ele


def element_children(node):
    return [child for child in node.childNodes
            if child.nodeType == Node.ELEMENT_NODE]


def get_text(node):
    """
    Return the concatenated text of a node and all its descendants
    """
    if node.nodeType in (Node.TEXT_NODE, Node.CDATA_SECTION_NODE):
        return node.data
    return u''.join(get_text(child) for child in node.childNodes)


def local_name(node):
    return node.localName or node.tagName.split(':')[-1]


def find_first(doc, namespace, *path):
    """
    Return the first element matching a path of tag names within a namespace
    (like the XPath '//ns:First/ns:Second'), or None.

    The first tag is matched anywhere in the document, later ones must be
    direct children of the previous match.
    """
    for ele in doc.getElementsByTagNameNS(namespace, path[0]):
        match = _descend(ele, namespace, path[1:])
        if match is not None:
            return match
    return None


def _descend(ele, namespace, path):
    if not path:
        return ele
    for child in element_children(ele):
        if child.namespaceURI == namespace and local_name(child) == path[0]:
            match = _descend(child, namespace, path[1:])
            if match is not None:
                return match
    return None


def node_to_dict(node):
    """
    Map each child element's tag name to its text.  Empty elements map to
    None rather than an empty string.
    """
    data = {}
    for child in element_children(node):
        text = get_text(child)
        data[local_name(child)] = text if text else None
    return data


def node_collection_to_list(node):
    return [node_to_dict(child) for child in element_children(node)]


def _mask_card_number(matchobj):
    """ Credit card number can be from 13 to 19 digits long, and may be
    written with spaces or dashes. Shown only last 4 of them and replace
    others with 'X' still keeping number of digits """
    digits = re.sub(r'\D', '', matchobj.group(2))
    return "<%(element)s>%(hidden)s%(last4)s</%(element)s>" % {
        'element': matchobj.group(1),
        'hidden': "X" * max(len(digits) - 4, 0),
        'last4': digits[-4:],
    }


def mask_sensitive_data(xml_str):
    """
    Hide the password, card number and CVN in request XML
    """
    xml_str = CARD_NUMBER_REGEX.sub(_mask_card_number, xml_str)
    xml_str = CVN_REGEX.sub(r'<\1>XXX</\1>', xml_str)
    return PASSWORD_REGEX.sub(r'<\1>XXX</\1>', xml_str)
